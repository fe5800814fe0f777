# SitemapSift — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Any, Dict, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	"""Application settings with sane defaults.

	Environment variables are prefixed with SITEMAPSIFT_. CLI flags can override.
	The Firecrawl key is also read from the plain FIRECRAWL_API_KEY variable.
	"""

	model_config = SettingsConfigDict(
		env_prefix="SITEMAPSIFT_", env_file=".env", extra="ignore", populate_by_name=True
	)

	user_agent: str = Field(default="Mozilla/5.0 (compatible; SitemapSift/0.1; +https://example.com/bot)")
	days: int = Field(default=1, ge=0)
	timeout: float = Field(default=20.0, gt=0)
	retries: int = Field(default=3, ge=0)
	backoff: float = Field(default=0.5, ge=0)
	workers: int = Field(default=4, ge=1)
	# 0 disables the limit
	max_depth: int = Field(default=10, ge=0)
	max_sitemaps: int = Field(default=10000, ge=0)
	output_dir: str = Field(default=".")
	output_suffix: str = Field(default="_urls.txt")
	log_level: str = Field(default="INFO")
	log_dir: Optional[str] = Field(default="logs")
	firecrawl_api_key: str = Field(
		default="",
		validation_alias=AliasChoices("SITEMAPSIFT_FIRECRAWL_API_KEY", "FIRECRAWL_API_KEY"),
	)
	firecrawl_endpoint: str = Field(default="https://api.firecrawl.dev/v0/scrape")

	def public_dump(self) -> Dict[str, Any]:
		data = self.model_dump()
		if data.get("firecrawl_api_key"):
			data["firecrawl_api_key"] = "***"
		return data
