"""Guess a file extension from leading content bytes."""

from __future__ import annotations

import mimetypes
from typing import Callable, List, Optional, Tuple


SNIFF_LENGTH = 512

OCTET_STREAM = "application/octet-stream"
PLAIN_TEXT = "text/plain; charset=utf-8"

_WHITESPACE = b"\t\n\x0c\r "
_TAG_TERMINATORS = b" >"

_HTML_TAGS = (
	b"<!DOCTYPE HTML",
	b"<HTML",
	b"<HEAD",
	b"<SCRIPT",
	b"<IFRAME",
	b"<H1",
	b"<DIV",
	b"<FONT",
	b"<TABLE",
	b"<A",
	b"<STYLE",
	b"<TITLE",
	b"<B",
	b"<BODY",
	b"<BR",
	b"<P",
	b"<!--",
)

# (prefix, content type); checked in order against the raw bytes
_EXACT_SIGNATURES: List[Tuple[bytes, str]] = [
	(b"\xfe\xff", "text/plain; charset=utf-16be"),
	(b"\xff\xfe", "text/plain; charset=utf-16le"),
	(b"\xef\xbb\xbf", "text/plain; charset=utf-8"),
	(b"OTTO", "font/otf"),
	(b"\x00\x01\x00\x00", "font/ttf"),
	(b"wOFF", "font/woff"),
	(b"wOF2", "font/woff2"),
	(b"GIF87a", "image/gif"),
	(b"GIF89a", "image/gif"),
	(b"\x00\x00\x01\x00", "image/x-icon"),
	(b"\x00\x00\x02\x00", "image/x-icon"),
	(b"BM", "image/bmp"),
	(b"\x89PNG\r\n\x1a\n", "image/png"),
	(b"\xff\xd8\xff", "image/jpeg"),
	(b"ID3", "audio/mpeg"),
	(b"OggS\x00", "application/ogg"),
	(b"MThd\x00\x00\x00\x06", "audio/midi"),
	(b"\x1a\x45\xdf\xa3", "video/webm"),
	(b"\x1f\x8b\x08", "application/x-gzip"),
	(b"PK\x03\x04", "application/zip"),
	(b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
	(b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
	(b"7z\xbc\xaf\x27\x1c", "application/x-7z-compressed"),
	(b"\x00asm", "application/wasm"),
]

# four-byte container tag at offset 0, form type at offset 8
_CONTAINER_SIGNATURES: List[Tuple[bytes, bytes, str]] = [
	(b"RIFF", b"WEBPVP", "image/webp"),
	(b"RIFF", b"AVI ", "video/avi"),
	(b"RIFF", b"WAVE", "audio/wave"),
	(b"FORM", b"AIFF", "audio/aiff"),
]

_PREFERRED_EXTENSIONS = {
	"text/html": ".html",
	"text/xml": ".xml",
	"text/plain": ".txt",
	"application/pdf": ".pdf",
	"application/postscript": ".ps",
	"font/otf": ".otf",
	"font/ttf": ".ttf",
	"font/woff": ".woff",
	"font/woff2": ".woff2",
	"image/gif": ".gif",
	"image/x-icon": ".ico",
	"image/bmp": ".bmp",
	"image/png": ".png",
	"image/jpeg": ".jpg",
	"image/webp": ".webp",
	"audio/aiff": ".aiff",
	"audio/mpeg": ".mp3",
	"audio/midi": ".mid",
	"audio/wave": ".wav",
	"application/ogg": ".ogg",
	"video/avi": ".avi",
	"video/mp4": ".mp4",
	"video/webm": ".webm",
	"application/x-gzip": ".gz",
	"application/zip": ".zip",
	"application/x-rar-compressed": ".rar",
	"application/x-7z-compressed": ".7z",
	"application/wasm": ".wasm",
}


def _skip_whitespace(data: bytes) -> bytes:
	return data.lstrip(_WHITESPACE)


def _sniff_markup(data: bytes) -> Optional[str]:
	body = _skip_whitespace(data)
	upper = body.upper()
	for tag in _HTML_TAGS:
		if upper.startswith(tag) and len(body) > len(tag) and body[len(tag)] in _TAG_TERMINATORS:
			return "text/html; charset=utf-8"
	if body.startswith(b"<?xml"):
		return "text/xml; charset=utf-8"
	return None


def _sniff_document(data: bytes) -> Optional[str]:
	if data.startswith(b"%PDF-"):
		return "application/pdf"
	if data.startswith(b"%!PS-Adobe-"):
		return "application/postscript"
	return None


def _sniff_exact(data: bytes) -> Optional[str]:
	for prefix, content_type in _EXACT_SIGNATURES:
		if data.startswith(prefix):
			return content_type
	return None


def _sniff_container(data: bytes) -> Optional[str]:
	for tag, form, content_type in _CONTAINER_SIGNATURES:
		if data.startswith(tag) and data[8:8 + len(form)] == form:
			return content_type
	return None


def _sniff_mp4(data: bytes) -> Optional[str]:
	if len(data) < 12:
		return None
	box_size = int.from_bytes(data[:4], "big")
	if box_size % 4 != 0 or box_size > len(data):
		return None
	if data[4:8] != b"ftyp":
		return None
	brands = [data[8:11]] + [data[i:i + 3] for i in range(16, box_size, 4)]
	if b"mp4" in brands:
		return "video/mp4"
	return None


def _is_binary(data: bytes) -> bool:
	for byte in data:
		if byte <= 0x08 or byte == 0x0B or 0x0E <= byte <= 0x1A or 0x1C <= byte <= 0x1F:
			return True
	return False


_SNIFFERS: List[Callable[[bytes], Optional[str]]] = [
	_sniff_markup,
	_sniff_document,
	_sniff_exact,
	_sniff_container,
	_sniff_mp4,
]


def detect_content_type(data: bytes) -> str:
	"""Content type guessed from at most the first 512 bytes of ``data``."""

	head = data[:SNIFF_LENGTH]
	for sniffer in _SNIFFERS:
		content_type = sniffer(head)
		if content_type:
			return content_type
	if _is_binary(head):
		return OCTET_STREAM
	return PLAIN_TEXT


def extension_for_type(content_type: str) -> str:
	media_type = content_type.split(";", 1)[0].strip().lower()
	if not media_type or media_type == OCTET_STREAM:
		return ""
	if media_type in _PREFERRED_EXTENSIONS:
		return _PREFERRED_EXTENSIONS[media_type]
	return mimetypes.guess_extension(media_type) or ""


def guess_extension(data: bytes) -> str:
	"""Best-effort extension (with leading dot) for ``data``, ``""`` if unknown."""

	if not data:
		return ""
	return extension_for_type(detect_content_type(data))
