from __future__ import annotations

from asset_loader.config.models import AssetConfiguration

DEFAULT_RETRY_ATTEMPTS = 3
DEFAULT_RETRY_DELAY_MS = 1000
DEFAULT_CACHE_DURATION_MS = 300_000

# Used whenever the remote configuration cannot be fetched or decoded.
DEFAULT_CONFIGURATION = AssetConfiguration.model_validate(
    {
        "version": "1.0.0",
        "assets": {
            "css": {
                "popup": {
                    "github_raw": "https://raw.githubusercontent.com/pokessniper/pokesnipe-assets/main/styles/popup.css",
                    "fallback": "inline",
                },
            },
        },
        "cdn_config": {
            "primary_host": "github_raw",
            "cache_duration": DEFAULT_CACHE_DURATION_MS,
            "retry_attempts": DEFAULT_RETRY_ATTEMPTS,
            "retry_delay": DEFAULT_RETRY_DELAY_MS,
        },
    }
)
