"""Localized UI strings."""

from __future__ import annotations

from typing import Dict, Optional

from PySide6.QtCore import QLocale

DEFAULT_LANGUAGE = "en"

CAPTURE_MANAGER = "CaptureManager"

_STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        CAPTURE_MANAGER: "Capture Manager",
        "DetachTab": "Detach Tab",
        "CloseTab": "Close Tab",
        "AttachTab": "Attach to Main Window",
    },
    "de": {
        CAPTURE_MANAGER: "Bildschirmfoto-Verwaltung",
        "DetachTab": "Tab abdocken",
        "CloseTab": "Tab schließen",
        "AttachTab": "An Hauptfenster andocken",
    },
    "fr": {
        CAPTURE_MANAGER: "Gestionnaire de captures",
        "DetachTab": "Détacher l'onglet",
        "CloseTab": "Fermer l'onglet",
        "AttachTab": "Rattacher à la fenêtre principale",
    },
    "es": {
        CAPTURE_MANAGER: "Administrador de capturas",
        "DetachTab": "Separar pestaña",
        "CloseTab": "Cerrar pestaña",
        "AttachTab": "Adjuntar a la ventana principal",
    },
    "cs": {
        CAPTURE_MANAGER: "Správce snímků",
        "DetachTab": "Oddělit záložku",
        "CloseTab": "Zavřít záložku",
        "AttachTab": "Připojit k hlavnímu oknu",
    },
}


class Resources:
    """Lookup of localized strings for one language."""

    def __init__(self, language: Optional[str] = None) -> None:
        if not language:
            language = QLocale.system().name().split("_")[0]
        language = language.lower()
        self.language = language if language in _STRINGS else DEFAULT_LANGUAGE

    def get_string(self, key: str) -> str:
        table = _STRINGS[self.language]
        if key in table:
            return table[key]
        return _STRINGS[DEFAULT_LANGUAGE][key]

    @property
    def capture_manager_title(self) -> str:
        return self.get_string(CAPTURE_MANAGER)


__all__ = ["CAPTURE_MANAGER", "DEFAULT_LANGUAGE", "Resources"]
