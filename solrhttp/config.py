import os
import socket
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

loaded = load_dotenv()
if not loaded and Path(".env").exists():
	raise RuntimeError(".env file present but failed to load")

FALLBACK_SOCKET_TIMEOUT = 60.0


def get_optional_str_env(name: str) -> Optional[str]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	return raw


def get_optional_float_env(name: str) -> Optional[float]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return None


def normalize_timeout(timeout: Optional[float]) -> float:
	"""Positive timeout in seconds; None, 0 and negatives become 60."""
	if timeout is None or timeout <= 0:
		return FALLBACK_SOCKET_TIMEOUT
	return float(timeout)


def default_socket_timeout() -> float:
	"""Process-wide fallback timeout in seconds.

	SOLR_DEFAULT_SOCKET_TIMEOUT wins, then the interpreter's socket default,
	then 60 seconds. Zero and negative values fall back to 60.
	"""
	timeout = get_optional_float_env("SOLR_DEFAULT_SOCKET_TIMEOUT")
	if timeout is None:
		timeout = socket.getdefaulttimeout()
	return normalize_timeout(timeout)
