import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    """Environment (and optional .env) driven settings.

    The defaults give the plain console text and quiet logging; overriding
    them only changes presentation and diagnostics, never catalog behaviour.
    """

    # Uygulama Ayarları
    app_name: str = os.getenv("APP_NAME", "Library Management System")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # CLI Ayarları: plain | rich | json
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain")

    # Log Ayarları
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


settings = Settings()
