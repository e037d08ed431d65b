import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Удалённый источник стихов
    POEMS_API_URL = os.getenv("POEMS_API_URL", "http://localhost:3001/api/poems")
    POEMS_API_TIMEOUT = float(os.getenv("POEMS_API_TIMEOUT", "10"))
    # Записи без поля type отбрасываются только в строгом режиме
    POEMS_REQUIRE_KIND = _env_flag("POEMS_REQUIRE_KIND")

    # Логи
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Тексты страницы
    SITE_EYEBROW = os.getenv("SITE_EYEBROW", "Cuaderno digital")
    SITE_TITLE = os.getenv("SITE_TITLE", "Honorato Rainbows")
    SITE_INTRO = os.getenv(
        "SITE_INTRO",
        "Un espacio mínimo para versos breves. Borradores, piezas terminadas y "
        "notas que aun respiran.",
    )
    SITE_FOOTER = os.getenv("SITE_FOOTER", "Santander, palabras entre la bruma y la montaña.")

    @property
    def SITE_TEXTS(self):
        return {
            "eyebrow": self.SITE_EYEBROW,
            "title": self.SITE_TITLE,
            "intro": self.SITE_INTRO,
            "footer": self.SITE_FOOTER,
        }

settings = Settings()
