# urltally — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Application settings with sane defaults.

	Environment variables are prefixed with URLTALLY_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="URLTALLY_", env_file=".env", extra="ignore")

	log_level: str = Field(default="INFO")
	log_dir: str = Field(default="logs")
	strip_whitespace: bool = Field(default=True)
	results_path: str = Field(default="")
