"""
config.py - Konfiguracja CLI przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks WCAL_. Rdzeń (tokenizer/parser/ewaluator)
nie czyta środowiska - ustawienia trafiają tylko do warstwy CLI.
"""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Tryb obliczeń dla wyrażeń bez flagi -i/-f i startowy tryb REPL
    default_mode: Literal["int", "float"] = "int"

    # Implementacja parsera (patrz adapters.parser.PARSERS)
    parser: Literal["top_down", "precedence"] = "top_down"

    # Logging
    log_level: str = "WARNING"

    # Wypisuj kroki obliczeń pod wynikiem
    show_steps: bool = False

    model_config = SettingsConfigDict(env_prefix="WCAL_", env_file=".env", extra="ignore")
