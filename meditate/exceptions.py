"""Exception types shared across the engine and session layers."""


class MeditateError(Exception):
    """Base class for application errors."""


class AssetUnavailable(MeditateError):
    """The audio resource for a resolved track could not be acquired."""

    def __init__(self, asset_id: str, reason: str = ""):
        self.asset_id = asset_id
        self.reason = reason
        message = f"audio asset '{asset_id}' unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
