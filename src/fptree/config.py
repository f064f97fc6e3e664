from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="FPTREE_", extra="ignore")

    merge_policy: Literal["wildcard", "first", "concat"] = Field(default="wildcard")
    merge_wildcard: str = Field(default="*", min_length=1)
    merge_separator: str = Field(default="/", min_length=1)
    output_dir: Path = Field(default=Path("./fingerprint_output"))
    markup_filename: str = Field(default="fingerprint_tree.xml", min_length=1)
    rules_filename: str = Field(default="fpdns_rules.pl", min_length=1)
    log_level: str = Field(default="INFO")


settings = Settings()
