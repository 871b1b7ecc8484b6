"""Runtime settings, read from the environment.

Defaults keep the storefront usable offline: the catalog and the local
cart live under ``<repo>/data``.  Supabase credentials are only checked
when a hosted collaborator is first needed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from storefront.domain.exceptions import ValidationError

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    state_file: Path
    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    captcha_token: str | None = None
    demo_email: str | None = None
    demo_password: str | None = None

    @property
    def catalog_file(self) -> Path:
        return self.data_dir / "products.json"

    def require_supabase(self) -> tuple[str, str]:
        if not self.supabase_url or not self.supabase_anon_key:
            raise ValidationError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
        return self.supabase_url, self.supabase_anon_key

    def require_demo_credentials(self) -> tuple[str, str]:
        if not self.demo_email or not self.demo_password:
            raise ValidationError(
                "Demo credentials missing (STOREFRONT_DEMO_EMAIL / STOREFRONT_DEMO_PASSWORD)."
            )
        return self.demo_email, self.demo_password

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        data_dir = Path(env.get("STOREFRONT_DATA_DIR") or _DEFAULT_DATA_DIR)
        state_file = Path(
            env.get("STOREFRONT_STATE_FILE") or data_dir / "local_storage.json"
        )
        return cls(
            data_dir=data_dir,
            state_file=state_file,
            supabase_url=env.get("SUPABASE_URL") or None,
            supabase_anon_key=env.get("SUPABASE_ANON_KEY") or None,
            captcha_token=env.get("STOREFRONT_CAPTCHA_TOKEN") or None,
            demo_email=env.get("STOREFRONT_DEMO_EMAIL") or None,
            demo_password=env.get("STOREFRONT_DEMO_PASSWORD") or None,
        )
