"""
Asynchronous KTP extraction through the OpenAI vision API.

The image is sent with a forced tool call so the model answers with the
KtpData fields as JSON arguments of `get_parsed_ktp`.
"""
import asyncio
import base64
import json
import logging
import time
from typing import Optional

import aiohttp

from komparisi.config import get_ocr_key, settings
from komparisi.imgprep.prepare import detect_mime_type, prepare_for_ocr
from komparisi.models import KtpData
from komparisi.ocr_prompt import KTP_SYSTEM_PROMPT, KTP_USER_PROMPT
from komparisi.utils.api_decorators import with_async_retry_backoff

logger = logging.getLogger(__name__)

KTP_FUNCTION_NAME = "get_parsed_ktp"


def _text(description: str) -> dict:
    return {"type": "string", "description": description}


KTP_FUNCTION_SCHEMA = {
    "name": KTP_FUNCTION_NAME,
    "description": "Parse structured data from an Indonesian KTP image",
    "parameters": {
        "type": "object",
        "properties": {
            "nik": _text("Nomor Induk Kependudukan."),
            "nama": _text("Nama lengkap saja, tanpa gelar depan atau belakang."),
            "gelarDepanExpanded": _text(
                "Kepanjangan dari SEMUA gelar di depan nama. Contoh: 'Prof. Dr.' menjadi "
                "'Profesor Doktor', 'H.' menjadi 'Haji'. Kembalikan string kosong jika tidak ada."
            ),
            "gelarBelakangExpanded": _text(
                "Kepanjangan dari SEMUA gelar di belakang nama. Contoh: 'S.H.' menjadi "
                "'Sarjana Hukum', 'S.Kom., M.T.' menjadi 'Sarjana Komputer, Magister Teknik'. "
                "Kembalikan string kosong jika tidak ada."
            ),
            "tempatLahir": _text("Tempat lahir."),
            "tanggalLahir": _text("Tanggal lahir dengan format DD-MM-YYYY."),
            "jenisKelamin": _text("Jenis kelamin, LAKI-LAKI atau PEREMPUAN."),
            "alamat": _text(
                "Alamat jalan dan nomor rumah. Pastikan untuk memperluas singkatan umum "
                "(misalnya 'Jl.' menjadi 'Jalan', 'Gg.' menjadi 'Gang')."
            ),
            "rt": _text("Nomor RT."),
            "rw": _text("Nomor RW."),
            "kelDesa": _text("Nama Kelurahan atau Desa."),
            "kecamatan": _text("Nama Kecamatan."),
            "kota": _text("Nama Kota atau Kabupaten tempat tinggal."),
            "statusPerkawinan": _text(
                "Status perkawinan: BELUM KAWIN, KAWIN, CERAI HIDUP, atau CERAI MATI."
            ),
            "pekerjaan": _text("Pekerjaan."),
            "kewarganegaraan": _text("Kewarganegaraan, contoh: WNI."),
        },
        "required": ["nik", "nama"],
    },
}


class ExtractionError(RuntimeError):
    """The vision API did not return usable KTP data."""


# Default timeout for the shared HTTP session
DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=30)

_http_session = None


async def get_http_session() -> aiohttp.ClientSession:
    """
    Get or create the shared HTTP session.

    Returns:
        aiohttp.ClientSession
    """
    global _http_session
    if _http_session is None or _http_session.closed:
        _http_session = aiohttp.ClientSession(timeout=DEFAULT_TIMEOUT)
    return _http_session


async def close_http_session():
    """Close the shared HTTP session on shutdown."""
    global _http_session
    if _http_session is not None and not _http_session.closed:
        await _http_session.close()
    _http_session = None


def build_payload(base64_image: str, mime_type: str) -> dict:
    """Chat-completions request forcing the get_parsed_ktp tool call."""
    return {
        "model": settings.OPENAI_MODEL,
        "max_tokens": 1024,
        "temperature": 0.0,
        "tools": [{"type": "function", "function": KTP_FUNCTION_SCHEMA}],
        "tool_choice": {"type": "function", "function": {"name": KTP_FUNCTION_NAME}},
        "messages": [
            {"role": "system", "content": KTP_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": KTP_USER_PROMPT},
                    {
                        "type": "image_url",
                        "image_url": {
                            "url": f"data:{mime_type};base64,{base64_image}",
                            "detail": "high",
                        },
                    },
                ],
            },
        ],
    }


def parse_tool_response(api_response: dict) -> KtpData:
    """
    Pull KtpData out of a chat-completions response.

    Raises:
        ExtractionError: When the response has no usable tool call
    """
    if not api_response.get("choices"):
        raise ExtractionError("Empty response from OpenAI API")

    message = api_response["choices"][0].get("message") or {}
    tool_calls = message.get("tool_calls") or []
    if not tool_calls:
        raise ExtractionError("Response contains no function result")

    function = tool_calls[0].get("function") or {}
    if function.get("name") != KTP_FUNCTION_NAME:
        raise ExtractionError(f"Unexpected function name: {function.get('name')}")

    try:
        result_data = json.loads(function.get("arguments") or "{}")
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Invalid JSON in function arguments: {e}") from e

    if not isinstance(result_data, dict):
        raise ExtractionError("Invalid function arguments: expected a JSON object")

    return KtpData.model_validate(result_data)


@with_async_retry_backoff(
    max_retries=settings.OCR_MAX_RETRIES, initial_backoff=1.0, wrap_error=ExtractionError
)
async def async_ocr(
    image_bytes: bytes,
    mime_type: str = "image/jpeg",
    req_id: Optional[str] = None,
    timeout: Optional[int] = None,
) -> KtpData:
    """
    Extract KTP fields from one image with the OpenAI vision API.

    Args:
        image_bytes: Raw image bytes
        mime_type: MIME type of the image
        req_id: Request ID for logging
        timeout: Timeout in seconds (settings.OCR_TIMEOUT by default)

    Returns:
        KtpData with the recognized fields

    Raises:
        asyncio.TimeoutError: If the API call exceeded the timeout
        ExtractionError: On API or response errors
    """
    req_id = req_id or f"ktp_{int(time.time())}"
    timeout = timeout or settings.OCR_TIMEOUT
    start_time = time.time()
    logger.info(f"[{req_id}] KTP extraction started, timeout {timeout}s")

    if settings.USE_IMAGE_PREPROCESSING:
        loop = asyncio.get_running_loop()
        prepared = await loop.run_in_executor(None, prepare_for_ocr, image_bytes)
        if prepared is not image_bytes:
            # resize_image re-encodes the image
            mime_type = detect_mime_type(prepared, default=mime_type)
    else:
        prepared = image_bytes

    base64_image = base64.b64encode(prepared).decode("utf-8")
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {get_ocr_key()}",
    }
    payload = build_payload(base64_image, mime_type)

    session = await get_http_session()
    request_timeout = aiohttp.ClientTimeout(total=timeout)
    api_start_time = time.time()

    try:
        async with session.post(
            settings.OPENAI_API_URL, json=payload, headers=headers, timeout=request_timeout
        ) as response:
            if response.status != 200:
                error_text = await response.text()
                logger.error(f"[{req_id}] API returned error: {response.status} {error_text}")
                raise ExtractionError(f"Vision API returned error: {response.status}")
            api_response = await response.json()
    except asyncio.TimeoutError:
        logger.error(f"[{req_id}] Vision API call exceeded timeout {timeout}s")
        raise
    except aiohttp.ClientError as e:
        raise ExtractionError(f"Network connection error: {e}") from e

    logger.info(f"[{req_id}] Vision API call finished in {time.time() - api_start_time:.2f}s")

    ktp = parse_tool_response(api_response)
    logger.info(f"[{req_id}] Total extraction time: {time.time() - start_time:.2f}s")
    return ktp
