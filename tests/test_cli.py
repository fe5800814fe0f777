import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

import sitemapsift.core.harvest as harvest_module
from sitemapsift.cli import app, harvest_app, pick_app


runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	monkeypatch.setenv("SITEMAPSIFT_LOG_DIR", "")
	monkeypatch.setenv("SITEMAPSIFT_OUTPUT_DIR", str(tmp_path))
	monkeypatch.delenv("FIRECRAWL_API_KEY", raising=False)
	monkeypatch.delenv("SITEMAPSIFT_FIRECRAWL_API_KEY", raising=False)
	return tmp_path


def use_session(monkeypatch, session):
	monkeypatch.setattr(harvest_module, "build_session", lambda **kwargs: session)


def test_missing_target_is_usage_error():
	result = runner.invoke(app, ["harvest"])
	assert result.exit_code == 2


@pytest.mark.parametrize("days", ["-1", "abc"])
def test_invalid_days_is_usage_error(days):
	result = runner.invoke(app, ["harvest", "--days", days, "https://x.test"])
	assert result.exit_code == 2


def test_harvest_writes_output(isolated_env, monkeypatch, mock_session, xml):
	use_session(monkeypatch, mock_session({"https://x.test/sitemap.xml": xml.urlset(("https://x.test/a", None))}))
	result = runner.invoke(app, ["harvest", "--days", "7", "https://x.test/sitemap.xml"])
	assert result.exit_code == 0, result.output
	assert "Found 1 unique URLs" in result.output
	assert (isolated_env / "x.test_urls.txt").read_text(encoding="utf-8") == "https://x.test/a\n"


def test_discovery_failure_exits_nonzero(isolated_env, monkeypatch, mock_session):
	use_session(monkeypatch, mock_session({"https://x.test/robots.txt": "User-agent: *\n"}))
	result = runner.invoke(app, ["harvest", "https://x.test"])
	assert result.exit_code == 1
	assert "No sitemaps found" in result.output
	assert (isolated_env / "x.test_urls.txt").read_text(encoding="utf-8") == ""


def test_extract_requires_api_key(isolated_env):
	urls = isolated_env / "links.txt"
	urls.write_text("https://x.test/a\n", encoding="utf-8")
	result = runner.invoke(app, ["extract", "-i", str(urls), "-o", str(isolated_env / "md")])
	assert result.exit_code == 2
	assert "FIRECRAWL_API_KEY" in result.output


def test_extract_requires_input_file(isolated_env, monkeypatch):
	monkeypatch.setenv("FIRECRAWL_API_KEY", "k")
	result = runner.invoke(app, ["extract", "-i", "missing.txt", "-o", "md"])
	assert result.exit_code == 2


def test_print_config_masks_key(monkeypatch):
	monkeypatch.setenv("FIRECRAWL_API_KEY", "super-secret")
	result = runner.invoke(app, ["print-config"])
	assert result.exit_code == 0
	assert "super-secret" not in result.output
	assert "user_agent" in result.output


def test_invalid_env_setting_is_usage_error(monkeypatch):
	monkeypatch.setenv("SITEMAPSIFT_DAYS", "-1")
	result = runner.invoke(app, ["harvest", "https://x.test/sitemap.xml"])
	assert result.exit_code == 2
	assert not isinstance(result.exception, ValidationError)


def test_bare_invocation_runs_harvest(isolated_env, monkeypatch, mock_session, xml):
	use_session(monkeypatch, mock_session({"https://x.test/sitemap.xml": xml.urlset(("https://x.test/a", None))}))
	result = runner.invoke(harvest_app, ["--days", "3", "https://x.test/sitemap.xml"])
	assert result.exit_code == 0, result.output
	assert (isolated_env / "x.test_urls.txt").read_text(encoding="utf-8") == "https://x.test/a\n"


@pytest.mark.parametrize(
	"args,expected",
	[
		([], "app"),
		(["--help"], "app"),
		(["harvest", "https://x.test"], "app"),
		(["extract", "-i", "a.txt", "-o", "out"], "app"),
		(["print-config"], "app"),
		(["https://x.test"], "harvest_app"),
		(["--days", "7", "https://x.test"], "harvest_app"),
	],
)
def test_pick_app(args, expected):
	assert pick_app(args) is {"app": app, "harvest_app": harvest_app}[expected]
