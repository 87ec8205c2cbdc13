"""Mod catalog access: the host API that owns mods, profiles and previews."""
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

import requests  # type: ignore

from .mod import Mod, Profile

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Custom exception for catalog API errors."""

    def __init__(self, message: str, error_type: str = "unknown", status_code: Optional[int] = None):
        """
        Initialize catalog error.

        Args:
            message: Error message for user
            error_type: Type of error - "offline", "not_found", "server_error", "timeout", "invalid", "unknown"
            status_code: HTTP status code if applicable
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code


class ModCatalogAPI:
    """Interface the state controller uses to reach the mod catalog."""

    def list_mods(self) -> List[Mod]:
        raise NotImplementedError

    def list_profiles(self) -> List[Profile]:
        raise NotImplementedError

    def current_profile_name(self) -> str:
        raise NotImplementedError

    def preview_artifact(self, mod_hash: str) -> Optional[bytes]:
        """Return preview image data for a mod, or None when it has none."""
        raise NotImplementedError

    def apply(self, mods: Sequence[Mod]) -> None:
        """Persist enabled state, options and load order for the current profile."""
        raise NotImplementedError


class StaticCatalogAPI(ModCatalogAPI):
    """In-memory catalog, used for offline runs and tests."""

    def __init__(
        self,
        mods: Iterable[Mod] = (),
        profiles: Iterable[str] = ("Default",),
        current_profile: str = "Default",
        previews: Optional[Dict[str, bytes]] = None,
    ):
        self.mods: List[Mod] = list(mods)
        self.profiles: List[Profile] = [Profile(name) for name in profiles]
        self.current_profile = current_profile
        self.previews: Dict[str, bytes] = dict(previews or {})
        self.applied: List[List[Mod]] = []

    def list_mods(self) -> List[Mod]:
        return list(self.mods)

    def list_profiles(self) -> List[Profile]:
        return list(self.profiles)

    def current_profile_name(self) -> str:
        return self.current_profile

    def preview_artifact(self, mod_hash: str) -> Optional[bytes]:
        return self.previews.get(mod_hash)

    def apply(self, mods: Sequence[Mod]) -> None:
        self.mods = list(mods)
        self.applied.append(list(mods))
        logger.info(f"Applied {len(self.mods)} mod(s) to profile {self.current_profile}")


class OfflineCatalogAPI(StaticCatalogAPI):
    """Empty stand-in catalog used when the manager host is unreachable."""

    def apply(self, mods: Sequence[Mod]) -> None:
        raise CatalogError("Offline: changes cannot be applied", error_type="offline")


class HttpCatalogAPI(ModCatalogAPI):
    """Client for a manager host serving the catalog over HTTP."""

    def __init__(self, base_url: str, timeout: float = 10):
        """
        Initialize catalog client.

        Args:
            base_url: Root URL of the manager host, e.g. http://127.0.0.1:6776
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, method: str, path: str, allow_missing: bool = False, **kwargs) -> Optional[requests.Response]:
        """
        Send a request and map transport and status failures to CatalogError.

        Returns:
            The response, or None for a 404 when allow_missing is set
        """
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            if response.status_code == 200:
                return response
            elif response.status_code == 404:
                if allow_missing:
                    return None
                raise CatalogError(
                    f"Catalog resource not found: {path}",
                    error_type="not_found",
                    status_code=404
                )
            elif response.status_code in [500, 502, 503, 504]:
                raise CatalogError(
                    f"Mod manager host error ({response.status_code}). Please try again later.",
                    error_type="server_error",
                    status_code=response.status_code
                )
            else:
                raise CatalogError(
                    f"Catalog returned status {response.status_code}",
                    error_type="server_error",
                    status_code=response.status_code
                )
        except requests.exceptions.ConnectionError:
            raise CatalogError(
                f"Cannot connect to the mod manager host at {self.base_url}.",
                error_type="offline"
            )
        except requests.exceptions.Timeout:
            raise CatalogError(
                "Connection to the mod manager host timed out. Please try again.",
                error_type="timeout"
            )
        except CatalogError:
            raise
        except Exception as e:
            raise CatalogError(
                f"Error requesting {path}: {str(e)}",
                error_type="unknown"
            )

    def _json(self, path: str) -> Any:
        response = self._request("GET", path)
        try:
            return response.json()
        except ValueError as e:
            raise CatalogError(f"Invalid JSON from {path}: {e}", error_type="invalid")

    def list_mods(self) -> List[Mod]:
        data = self._json("/mods")
        try:
            return [Mod.from_dict(item) for item in data]
        except (KeyError, TypeError) as e:
            raise CatalogError(f"Malformed mod entry: {e}", error_type="invalid")

    def list_profiles(self) -> List[Profile]:
        data = self._json("/profiles")
        profiles = []
        for item in data:
            name = item.get("name") if isinstance(item, dict) else item
            if not isinstance(name, str):
                raise CatalogError(f"Malformed profile entry: {item!r}", error_type="invalid")
            profiles.append(Profile(name))
        return profiles

    def current_profile_name(self) -> str:
        data = self._json("/profiles/current")
        name = data.get("name") if isinstance(data, dict) else data
        if not isinstance(name, str):
            raise CatalogError(f"Malformed current profile: {data!r}", error_type="invalid")
        return name

    def preview_artifact(self, mod_hash: str) -> Optional[bytes]:
        response = self._request("GET", f"/mods/{mod_hash}/preview", allow_missing=True)
        if response is None or not response.content:
            return None
        return response.content

    def apply(self, mods: Sequence[Mod]) -> None:
        payload = {
            "order": [mod.hash for mod in mods],
            "mods": [
                {
                    "hash": mod.hash,
                    "enabled": mod.enabled,
                    "enabled_options": list(mod.enabled_options),
                }
                for mod in mods
            ],
        }
        self._request("POST", "/apply", json=payload)
        logger.info(f"Applied {len(mods)} mod(s) through {self.base_url}")
