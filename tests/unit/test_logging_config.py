"""
Tests pour la configuration loguru.
"""

import json
from pathlib import Path

import pytest
from loguru import logger

from imdb_api.logging_config import configure_logging, mask_api_key


@pytest.fixture
def restore_logger():
    """Remet loguru dans un etat neutre apres le test."""
    yield
    logger.remove()
    logger.configure(patcher=None)


class TestMaskApiKey:
    """Tests pour le masquage de la cle API."""

    def test_masks_key_in_url(self) -> None:
        record = {"message": "GET https://www.omdbapi.com/?apikey=s3cr3t&t=Alien failed"}
        mask_api_key(record)
        assert record["message"] == "GET https://www.omdbapi.com/?apikey=***&t=Alien failed"

    def test_message_without_key_unchanged(self) -> None:
        record = {"message": "OMDb get: Alien"}
        mask_api_key(record)
        assert record["message"] == "OMDb get: Alien"


class TestConfigureLogging:
    """Tests pour configure_logging()."""

    def test_file_handler_writes_masked_json(self, tmp_path: Path, restore_logger) -> None:
        log_file = tmp_path / "nested" / "imdb-api.log"

        configure_logging(log_level="WARNING", log_file=log_file)
        logger.debug("GET https://www.omdbapi.com/?apikey=s3cr3t&i=tt0944947")
        logger.remove()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        messages = [json.loads(line)["record"]["message"] for line in lines]
        assert any("apikey=***" in message for message in messages)
        assert "s3cr3t" not in log_file.read_text(encoding="utf-8")
