import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

BACKEND_DIR = Path(__file__).resolve().parent.parent

# Local development only; real deployments set these in the environment
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('true', '1', 'yes', 'require')


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 5500
    database_url: str = "postgresql://localhost:5432/postgres"
    database_ssl: bool = True
    email_host: str = "smtp.gmail.com"
    email_port: int = 465
    email_user: str = ""
    email_pass: str = ""
    email_receiver: str = ""
    frontend_dir: Path = BACKEND_DIR / "frontend"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from environment variables (and a .env file if present)."""
        return cls(
            host=os.getenv('HOST', cls.host),
            port=int(os.getenv('PORT') or cls.port),
            database_url=os.getenv('DATABASE_URL') or cls.database_url,
            database_ssl=_env_flag('DATABASE_SSL', cls.database_ssl),
            email_host=os.getenv('EMAIL_HOST', cls.email_host),
            email_port=int(os.getenv('EMAIL_PORT') or cls.email_port),
            email_user=os.getenv('EMAIL_USER', ''),
            email_pass=os.getenv('EMAIL_PASS', ''),
            email_receiver=os.getenv('EMAIL_RECEIVER', ''),
            frontend_dir=Path(os.getenv('FRONTEND_DIR') or cls.frontend_dir),
        )
