"""
Batch Processor - applies one scheme to large multi-line input.

Input is cut on newline boundaries and every chunk goes through the Codec
Engine in order. Progress is reported as a fraction after each chunk, and a
CancellationToken can stop the run between chunks. A failed or cancelled
batch never returns partial output.
"""

import asyncio
import os
import tempfile
import threading
from pathlib import Path
from typing import Callable, List, Optional

from .engine import transform
from .errors import BatchCancelledError
from .log import log_info, log_warn
from .models import ConversionOptions
from .registry import Scheme

ProgressCallback = Callable[[float], None]


class CancellationToken:
    """Thread-safe flag polled by the batch processor between chunks."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


def split_chunks(text: str) -> List[str]:
    """
    Split text into newline-delimited chunks.

    A trailing newline yields a trailing empty chunk; empty text yields none.
    """
    if not text:
        return []
    return text.split("\n")


def _check_cancelled(token: Optional[CancellationToken], completed: int, total: int):
    if token is not None and token.cancelled:
        log_warn(f"Batch cancelled after {completed}/{total} chunk(s). Output discarded.")
        raise BatchCancelledError(completed, total)


def process_batch(
    text: str,
    scheme: Scheme,
    options: Optional[ConversionOptions] = None,
    on_progress: Optional[ProgressCallback] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> str:
    """
    Convert text chunk by chunk.

    Args:
        text: Multi-line input
        scheme: Scheme applied to every chunk
        options: Direction and Caesar shift
        on_progress: Called with completed/total after each chunk
        cancel_token: Checked before each chunk

    Returns:
        The converted chunks, each followed by a newline
    """
    chunks = split_chunks(text)
    total = len(chunks)
    log_info(f"Batch: {total} chunk(s) with {scheme.display_name}.")

    output = []
    for index, chunk in enumerate(chunks):
        _check_cancelled(cancel_token, index, total)
        output.append(transform(scheme, chunk, options))
        output.append("\n")
        if on_progress is not None:
            on_progress((index + 1) / total)

    return "".join(output)


async def process_batch_async(
    text: str,
    scheme: Scheme,
    options: Optional[ConversionOptions] = None,
    on_progress: Optional[ProgressCallback] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> str:
    """
    Coroutine flavour of process_batch.

    Yields to the event loop after every chunk so a host loop stays
    responsive. Cancelling the surrounding task stops the run the same way
    the token does: nothing is returned.
    """
    chunks = split_chunks(text)
    total = len(chunks)
    log_info(f"Batch (async): {total} chunk(s) with {scheme.display_name}.")

    output = []
    for index, chunk in enumerate(chunks):
        _check_cancelled(cancel_token, index, total)
        output.append(transform(scheme, chunk, options))
        output.append("\n")
        if on_progress is not None:
            on_progress((index + 1) / total)
        await asyncio.sleep(0)

    return "".join(output)


def output_filename(source, scheme: Scheme, reverse: bool) -> str:
    """Name of the converted file: <stem>_<scheme name>_<encoded|decoded>.txt"""
    stem = Path(source).stem
    direction = "decoded" if reverse else "encoded"
    return f"{stem}_{scheme.display_name}_{direction}.txt"


def process_file(
    path,
    scheme: Scheme,
    options: Optional[ConversionOptions] = None,
    on_progress: Optional[ProgressCallback] = None,
    output_dir=None,
    cancel_token: Optional[CancellationToken] = None,
) -> Path:
    """
    Convert a UTF-8 text file and write the result into output_dir.

    Args:
        path: Source file
        scheme: Scheme applied to every line
        options: Direction and Caesar shift
        on_progress: Forwarded to process_batch
        output_dir: Destination directory (default: system temp dir)
        cancel_token: Forwarded to process_batch

    Returns:
        Path of the written file
    """
    if options is None:
        options = ConversionOptions()

    source = Path(path)
    with open(source, "r", encoding="utf-8") as f:
        text = f.read()

    converted = process_batch(text, scheme, options, on_progress, cancel_token)

    target_dir = Path(output_dir) if output_dir is not None else Path(tempfile.gettempdir())
    os.makedirs(target_dir, exist_ok=True)
    out_path = target_dir / output_filename(source, scheme, options.reverse)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(converted)

    log_info(f"Saved {out_path}")
    return out_path
