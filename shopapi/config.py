# shopapi/config.py
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

# Collection files live alongside the program unless SHOPAPI_DATA_DIR says otherwise
PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    data_dir: Path = PROJECT_ROOT
    products_file: str = "productos.json"
    carts_file: str = "carrito.json"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def products_path(self) -> Path:
        return Path(self.data_dir) / self.products_file

    @property
    def carts_path(self) -> Path:
        return Path(self.data_dir) / self.carts_file

    @classmethod
    def from_env(cls) -> "Settings":
        log_file = os.getenv("SHOPAPI_LOG_FILE", "").strip()
        return cls(
            data_dir=Path(os.getenv("SHOPAPI_DATA_DIR", str(PROJECT_ROOT))),
            products_file=os.getenv("SHOPAPI_PRODUCTS_FILE", "productos.json"),
            carts_file=os.getenv("SHOPAPI_CARTS_FILE", "carrito.json"),
            host=os.getenv("SHOPAPI_HOST", "0.0.0.0"),
            port=int(os.getenv("SHOPAPI_PORT", "8080")),
            log_level=os.getenv("SHOPAPI_LOG_LEVEL", "INFO").upper(),
            log_file=Path(log_file) if log_file else None,
            cors_origins=_split_origins(os.getenv("SHOPAPI_CORS_ORIGINS", "*")),
        )
