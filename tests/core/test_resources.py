from __future__ import annotations

import pytest

from terminals.core.resources import CAPTURE_MANAGER, Resources


def test_capture_manager_label_is_localized() -> None:
    assert Resources("en").capture_manager_title == "Capture Manager"
    assert Resources("de").get_string(CAPTURE_MANAGER) == "Bildschirmfoto-Verwaltung"


def test_unknown_language_falls_back_to_english() -> None:
    resources = Resources("xx")

    assert resources.language == "en"
    assert resources.capture_manager_title == "Capture Manager"


def test_unknown_key_raises() -> None:
    with pytest.raises(KeyError):
        Resources("en").get_string("NoSuchString")
