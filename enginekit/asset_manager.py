"""Loading and caching of assets, with one manager per asset type."""

from __future__ import annotations

from pathlib import Path


class AssetError(Exception):
    """Raised when an asset cannot be found, loaded or has no manager."""


class AssetCache:
    """Named assets kept in memory; ``clear`` hands each to the destroyer."""

    def __init__(self, destroyer=None):
        self._assets = {}
        self._destroyer = destroyer

    def insert_asset(self, name, asset):
        """Store ``asset`` under ``name``; an existing entry is kept."""
        self._assets.setdefault(name, asset)

    def has_asset(self, name):
        return name in self._assets

    def load_asset(self, name):
        try:
            return self._assets[name]
        except KeyError:
            raise AssetError(f"Asset {name!r} is not cached") from None

    def clear(self):
        """Destroy every cached asset and empty the cache."""
        if self._destroyer is not None:
            for asset in self._assets.values():
                self._destroyer(asset)
        self._assets.clear()

    def __iter__(self):
        return iter(self._assets.items())

    def __len__(self):
        return len(self._assets)


class AssetLoader:
    """Reads an asset file, parses it to a description and converts that to the asset."""

    def __init__(self, parser, converter, path_for=None, root="res"):
        self._parser = parser
        self._converter = converter
        self._path_for = path_for if path_for is not None else str
        self._root = Path(root)

    def load_asset(self, name):
        path = self._root / self._path_for(name)
        try:
            source = path.read_bytes()
        except OSError as exc:
            raise AssetError(f"Could not read asset {name!r} from {path}") from exc
        return self._converter(self._parser(source))


class TypeManager:
    """Loads assets of one type on first request and serves them from the cache after."""

    def __init__(self, loader, cache):
        self.loader = loader
        self.cache = cache

    def cleanup(self):
        self.cache.clear()

    def load_asset(self, name):
        if not self.cache.has_asset(name):
            self.cache.insert_asset(name, self.loader.load_asset(name))
        return self.cache.load_asset(name)


class AssetManager:
    """Dispatches asset requests to the manager registered for each asset type."""

    def __init__(self):
        self._managers = {}

    def is_registered(self, asset_type):
        return asset_type in self._managers

    def register_asset_type(self, asset_type, manager):
        """Use ``manager`` for ``asset_type``, replacing any earlier one; return it."""
        self._managers[asset_type] = manager
        return manager

    def register_loader(self, asset_type, loader, cache):
        """Register a ``TypeManager`` built from ``loader`` and ``cache``."""
        return self.register_asset_type(asset_type, TypeManager(loader, cache))

    def load_asset(self, asset_type, name):
        manager = self._managers.get(asset_type)
        if manager is None:
            type_name = getattr(asset_type, "__name__", repr(asset_type))
            raise AssetError(f"Tried to load unregistered asset type {type_name}!")
        return manager.load_asset(name)