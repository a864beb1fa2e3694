"""
Tests for the Azure OpenAI client and the extraction prompt wrapper.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from backend.core import extraction, llm


@pytest.fixture()
def configured():
    with patch.object(llm.settings, "AZURE_OPENAI_ENDPOINT", "https://example.openai.azure.com"), \
         patch.object(llm.settings, "AZURE_OPENAI_API_KEY", "test-key"), \
         patch.object(llm.settings, "AZURE_OPENAI_DEPLOYMENT", "gpt-4o-mini-s"), \
         patch.object(llm.settings, "AZURE_OPENAI_API_VERSION", "2024-02-01"):
        yield


def _response(payload: dict) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp


class TestGenerate:

    def test_not_configured(self):
        with patch.object(llm.settings, "AZURE_OPENAI_API_KEY", ""), \
             patch("backend.core.llm.requests.post") as mock_post:
            assert llm.generate("hello") is None
        mock_post.assert_not_called()

    def test_request_shape(self, configured):
        with patch("backend.core.llm.requests.post",
                   return_value=_response({"choices": [{"message": {"content": "{}"}}]})) as mock_post:
            assert llm.generate("hello", system="be brief") == "{}"

        args, kwargs = mock_post.call_args
        assert args[0] == (
            "https://example.openai.azure.com/openai/deployments/gpt-4o-mini-s"
            "/chat/completions?api-version=2024-02-01"
        )
        assert kwargs["headers"]["api-key"] == "test-key"
        body = kwargs["json"]
        assert body["messages"] == [
            {"role": "system", "content": "be brief"},
            {"role": "user", "content": "hello"},
        ]
        assert body["max_tokens"] == 800
        assert body["temperature"] == 0.3
        assert body["top_p"] == 0.95

    def test_http_error(self, configured):
        with patch("backend.core.llm.requests.post",
                   side_effect=requests.ConnectionError("down")):
            assert llm.generate("hello") is None

    def test_no_choices(self, configured):
        with patch("backend.core.llm.requests.post", return_value=_response({"choices": []})):
            assert llm.generate("hello") is None


class TestExtraction:

    def test_uses_extraction_prompt(self):
        with patch("backend.core.extraction.llm.generate", return_value='{"products": []}') as mock_generate:
            assert extraction.extract_products("3 widgets") == '{"products": []}'

        args, kwargs = mock_generate.call_args
        assert args[0] == "3 widgets"
        assert '"part_id": ""' in kwargs["system"]
        assert "Part ID contains only numbers" in kwargs["system"]

    def test_failure_passes_none(self):
        with patch("backend.core.extraction.llm.generate", return_value=None):
            assert extraction.extract_products("3 widgets") is None
