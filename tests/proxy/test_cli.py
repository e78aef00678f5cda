"""Tests for the content-proxy command line."""

from unittest.mock import patch
from urllib.parse import parse_qsl

import pytest

from content_proxy.proxy import build_context
from content_proxy.proxy.main import build_parser, main
from content_proxy.signature import verify_signature


class TestSign:
    def test_output_verifies(self, capsys):
        code = main(["sign", "shop=demo.myshopify.com", "path_prefix=/apps/blog", "--secret", "s3cret"])
        assert code == 0
        query = capsys.readouterr().out.strip()
        pairs = parse_qsl(query, keep_blank_values=True)
        assert ("shop", "demo.myshopify.com") in pairs
        assert verify_signature(pairs, "s3cret") is True

    def test_secret_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("SHOPIFY_CLIENT_SECRET", "from-env")
        assert main(["sign", "shop=demo"]) == 0
        pairs = parse_qsl(capsys.readouterr().out.strip())
        assert verify_signature(pairs, "from-env") is True

    def test_malformed_pair(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["sign", "no-equals-sign"])


class TestRender:
    def test_from_json_export(self, fixtures_dir, tmp_path):
        output = tmp_path / "out" / "page.html"
        code = main(["render", "--input", str(fixtures_dir / "sample_blog.json"), "--output", str(output)])
        assert code == 0
        html = output.read_text(encoding="utf-8")
        assert "<h1>Bien choisir sa crème solaire</h1>" in html

    def test_slug_from_store(self, settings, fake_store, capsys):
        context = build_context(settings, fake_store)
        with patch("content_proxy.proxy.main.build_context", return_value=context):
            code = main(["render", "mon-article"])
        assert code == 0
        assert "<h1>Titre</h1>" in capsys.readouterr().out

    def test_author_list_by_default(self, settings, fake_store, capsys):
        context = build_context(settings, fake_store)
        with patch("content_proxy.proxy.main.build_context", return_value=context):
            code = main(["render"])
        assert code == 0
        assert "<h1>Nos auteurs</h1>" in capsys.readouterr().out

    def test_missing_post_fails(self, settings, fake_store):
        context = build_context(settings, fake_store)
        with patch("content_proxy.proxy.main.build_context", return_value=context):
            assert main(["render", "inconnu"]) == 1
