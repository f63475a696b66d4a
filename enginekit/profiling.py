"""Scoped timing of code sections and export in trace-event layout."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

_INIT_NS = time.monotonic_ns()


@dataclass(frozen=True)
class Profile:
    """One timed section: start and duration in microseconds."""

    name: str
    start: int
    duration: int


class ProfileSession:
    """Collects profiles recorded by its timers, in order of completion."""

    def __init__(self):
        self.profiles: list[Profile] = []

    def clear(self):
        """Forget all recorded profiles."""
        self.profiles.clear()

    @contextmanager
    def timer(self, title):
        """Time the enclosed block and record it under ``title`` when it ends."""
        birth = time.monotonic_ns()
        try:
            yield
        finally:
            lifetime = time.monotonic_ns() - birth
            self.profiles.append(
                Profile(
                    name=title,
                    start=(birth - _INIT_NS) // 1000,
                    duration=lifetime // 1000,
                )
            )

    def __len__(self):
        return len(self.profiles)

    def __iter__(self):
        return iter(self.profiles)


def format_profile(profile):
    """Render one profile as a trace-event object."""
    fields = [
        ("name", profile.name),
        ("cat", ""),
        ("ph", "X"),
        ("ts", profile.start),
        ("dur", profile.duration),
        ("pid", "0"),
        ("tid", "0"),
        ("args", "{}"),
    ]
    body = ",\n".join(f'    "{key}": "{value}"' for key, value in fields)
    return "  {\n" + body + "  }"


class ProfileWriter:
    """Writes a list of profiles to a file as a trace-event array."""

    def __init__(self, output_path):
        self.output_path = Path(output_path)

    def write_session(self, profiles):
        """Write ``profiles``; nothing is written when there are none."""
        profiles = list(profiles)
        if not profiles:
            return
        content = "[\n" + ",\n".join(format_profile(p) for p in profiles) + "\n]"
        self.output_path.write_text(content, encoding="utf-8")