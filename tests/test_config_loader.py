# tests/test_config_loader.py
"""
Tests for loading an existing config and flattening it into defaults.
"""

from __future__ import annotations

import json

import pytest

from chatbot_config.config.loader import WizardDefaults, load_defaults, load_existing_config
from chatbot_config.core.exceptions import ConfigParseError, ConfigValidationError

pytestmark = pytest.mark.tier2

KENDRA_ID = "12345678-1234-1234-1234-123456789012"
OTHER_KENDRA_ID = "abcdef01-2345-6789-abcd-ef0123456789"


def _embeddings(default: str = "amazon.titan-embed-text-v1") -> list[dict]:
    models = [
        {"provider": "sagemaker", "name": "intfloat/multilingual-e5-large", "dimensions": 1024},
        {"provider": "sagemaker", "name": "sentence-transformers/all-MiniLM-L6-v2", "dimensions": 384},
        {"provider": "bedrock", "name": "amazon.titan-embed-text-v1", "dimensions": 1536},
        {"provider": "openai", "name": "text-embedding-ada-002", "dimensions": 1536},
    ]
    for m in models:
        if m["name"] == default:
            m["default"] = True
    return models


def _document(**overrides) -> dict:
    doc = {
        "prefix": "prod",
        "privateWebsite": True,
        "certificate": "arn:aws:acm:us-east-1:123456789012:certificate/abc",
        "domain": "chat.example.com",
        "bedrock": {
            "enabled": True,
            "region": "us-west-2",
            "roleArn": "arn:aws:iam::123456789012:role/BedrockAccess",
        },
        "llms": {"sagemaker": ["FalconLite [ml.g5.12xlarge]"]},
        "rag": {
            "enabled": True,
            "engines": {
                "aurora": {"enabled": False},
                "opensearch": {"enabled": True},
                "kendra": {
                    "enabled": True,
                    "createIndex": False,
                    "external": [
                        {"enabled": True, "name": "first", "kendraId": KENDRA_ID, "region": "eu-west-1"},
                        {
                            "enabled": False,
                            "name": "second",
                            "roleArn": "arn:aws:iam::123456789012:role/KendraAccess",
                            "kendraId": OTHER_KENDRA_ID,
                            "region": "us-east-1",
                        },
                    ],
                    "enterprise": True,
                },
            },
            "embeddingsModels": _embeddings(),
            "crossEncoderModels": [
                {
                    "provider": "sagemaker",
                    "name": "cross-encoder/ms-marco-MiniLM-L-12-v2",
                    "default": True,
                }
            ],
        },
    }
    doc.update(overrides)
    return doc


def _write(path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


class TestLoadExistingConfig:
    """Tests for load_existing_config."""

    def test_missing_file_returns_none(self, tmp_path):
        assert load_existing_config(tmp_path / "bin" / "config.json") is None

    def test_default_path_uses_workspace(self, workspace):
        _write(workspace / "bin" / "config.json", _document())

        config = load_existing_config()

        assert config.prefix == "prod"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="Invalid JSON"):
            load_existing_config(path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b'{"prefix": "\xff\xfe"}')

        with pytest.raises(ConfigParseError, match="Failed to read config"):
            load_existing_config(path)

    def test_root_must_be_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="JSON object"):
            load_existing_config(path)

    def test_schema_mismatch(self, tmp_path):
        path = tmp_path / "config.json"
        _write(path, _document(rag={"enabled": True}))

        with pytest.raises(ConfigValidationError) as exc_info:
            load_existing_config(path)

        assert str(path) in str(exc_info.value)

    def test_invariant_violation_is_rejected(self, tmp_path):
        """RAG disabled with an engine still enabled is not a valid document."""
        doc = _document()
        doc["rag"]["enabled"] = False
        path = tmp_path / "config.json"
        _write(path, doc)

        with pytest.raises(ConfigValidationError):
            load_existing_config(path)

    def test_bad_kendra_id_is_rejected(self, tmp_path):
        doc = _document()
        doc["rag"]["engines"]["kendra"]["external"][0]["kendraId"] = "not-a-uuid"
        path = tmp_path / "config.json"
        _write(path, doc)

        with pytest.raises(ConfigValidationError, match="kendraId"):
            load_existing_config(path)


class TestWizardDefaults:
    """Tests for flattening a config into prompt defaults."""

    def test_empty_defaults(self, tmp_path):
        defaults = load_defaults(tmp_path / "missing.json")

        assert defaults == WizardDefaults()
        assert defaults.kendra_external == ()

    def test_flattening(self, tmp_path):
        path = tmp_path / "config.json"
        _write(path, _document())

        defaults = load_defaults(path)

        assert defaults.prefix == "prod"
        assert defaults.private_website is True
        assert defaults.domain == "chat.example.com"
        assert defaults.bedrock_enable is True
        assert defaults.bedrock_region == "us-west-2"
        assert defaults.bedrock_role_arn == "arn:aws:iam::123456789012:role/BedrockAccess"
        assert defaults.enable_sagemaker_models is True
        assert defaults.sagemaker_models == ("FalconLite [ml.g5.12xlarge]",)
        assert defaults.enable_rag is True
        assert defaults.kendra_enterprise is True
        assert [s.name for s in defaults.kendra_external] == ["first", "second"]
        assert defaults.default_embedding == "amazon.titan-embed-text-v1"

    def test_kendra_preselected_only_when_creating_index(self, tmp_path):
        """External indexes alone do not pre-select the managed Kendra engine."""
        path = tmp_path / "config.json"
        _write(path, _document())

        assert load_defaults(path).rags_to_enable == ("opensearch",)

        doc = _document()
        doc["rag"]["engines"]["kendra"]["createIndex"] = True
        _write(path, doc)

        assert load_defaults(path).rags_to_enable == ("opensearch", "kendra")

    def test_without_bedrock_block(self, tmp_path):
        doc = _document()
        del doc["bedrock"]
        path = tmp_path / "config.json"
        _write(path, doc)

        defaults = load_defaults(path)

        assert defaults.bedrock_enable is False
        assert defaults.bedrock_region is None

    def test_prefix_override(self):
        defaults = WizardDefaults(prefix="from-file")

        assert defaults.with_prefix("from-flag").prefix == "from-flag"
        assert defaults.with_prefix(None).prefix == "from-file"
