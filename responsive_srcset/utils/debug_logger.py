"""
Debug logger for srcset generation.

Supports configurable log levels (NONE, INFO, DEBUG, TRACE) and dual output:
- Console: Human-readable formatted output
- File: JSON Lines format for parsing and analysis
"""

import json
import os
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv


class LogLevel(Enum):
    """Logging levels for srcset debug output."""

    NONE = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3


class SrcsetLogger:
    """Centralized logger for srcset generation with configurable levels."""

    _instance: Optional["SrcsetLogger"] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the logger with configuration from environment."""
        if self._initialized:
            return

        load_dotenv()

        level_str = os.getenv("SRCSET_DEBUG_LEVEL", "NONE").upper()
        try:
            self.level = LogLevel[level_str]
        except KeyError:
            self.level = LogLevel.NONE

        self.log_to_file = os.getenv("SRCSET_LOG_TO_FILE", "false").lower() == "true"
        self.log_dir = Path(os.getenv("SRCSET_LOG_DIR", "outputs"))

        self._initialized = True

    @classmethod
    def reset(cls) -> "SrcsetLogger":
        """Drop the current instance and re-read configuration."""
        cls._instance = None
        return cls()

    def _should_log(self, min_level: LogLevel) -> bool:
        """Check if we should log at the given level."""
        return self.level.value >= min_level.value

    def _format_timestamp(self) -> str:
        return datetime.now().isoformat()

    def _truncate_content(self, content: str, max_len: int = 200) -> str:
        """Truncate content for preview."""
        if len(content) <= max_len:
            return content
        return content[:max_len] + "... [truncated]"

    def _log_path(self, source: str) -> Path:
        # Source identifiers may contain folders; keep them inside one directory
        safe_source = source.strip("/").replace("/", "_") or "unnamed"
        return self.log_dir / safe_source / "logs" / "srcset_calls.jsonl"

    def _write_to_file(self, source: Optional[str], log_entry: Dict[str, Any]):
        """Write log entry to JSON Lines file."""
        if not self.log_to_file or not source:
            return

        log_file = self._log_path(source)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")

    def log_generation(
        self,
        source: str,
        widths: Any,
        base_transformation: str = "",
    ) -> str:
        """
        Log the start of a srcset generation.

        Returns:
            Generation ID (UUID string) for tracking this call
        """
        if not self._should_log(LogLevel.INFO):
            return ""

        generation_id = str(uuid.uuid4())
        timestamp = self._format_timestamp()

        console_msg = f"[{timestamp}] 🔵 Srcset: {source} | {len(widths)} breakpoints"
        if base_transformation:
            console_msg += f" | base: {base_transformation}"
        print(console_msg)

        self._write_to_file(source, {
            "timestamp": timestamp,
            "level": self.level.name,
            "event": "generation",
            "generation_id": generation_id,
            "source": source,
            "widths": list(widths),
            "base_transformation": base_transformation,
        })

        return generation_id

    def log_breakpoint(
        self,
        generation_id: str,
        source: str,
        width: int,
        transformation: str,
        url: str,
    ):
        """Log a single rendered breakpoint URL."""
        if not self._should_log(LogLevel.DEBUG):
            return

        print(f"  {width}w -> {url}")
        if self._should_log(LogLevel.TRACE):
            print(f"    transformation: {transformation}")

        self._write_to_file(source, {
            "timestamp": self._format_timestamp(),
            "level": self.level.name,
            "event": "breakpoint",
            "generation_id": generation_id,
            "source": source,
            "width": width,
            "transformation": transformation,
            "url": url,
        })

    def log_result(
        self,
        generation_id: str,
        source: str,
        srcset: str,
        largest_url: str,
        latency_ms: float,
    ):
        """Log the assembled srcset."""
        if not self._should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        print(f"[{timestamp}] ✅ Srcset ready: {source} | {latency_ms:.2f}ms | largest: {largest_url}")

        if self._should_log(LogLevel.TRACE):
            print(f"  srcset: {srcset}")
        elif self._should_log(LogLevel.DEBUG):
            print(f"  srcset: {self._truncate_content(srcset)}")

        self._write_to_file(source, {
            "timestamp": timestamp,
            "level": self.level.name,
            "event": "result",
            "generation_id": generation_id,
            "source": source,
            "srcset": srcset if self.level == LogLevel.TRACE else None,
            "srcset_preview": self._truncate_content(srcset),
            "largest_url": largest_url,
            "latency_ms": latency_ms,
        })

    def log_no_result(self, source: str):
        """Log a generation that produced no srcset."""
        if not self._should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        print(f"[{timestamp}] ⚪ Srcset skipped: {source} | no breakpoints")

        self._write_to_file(source, {
            "timestamp": timestamp,
            "level": self.level.name,
            "event": "no_result",
            "source": source,
        })


def get_logger() -> SrcsetLogger:
    """Get the singleton logger instance."""
    return SrcsetLogger()
