"""
Stream utilities.

Helpers for consuming asynchronous byte streams returned by HTTP clients.
"""

from typing import AsyncIterable, Union


async def stream_to_string(
    stream: AsyncIterable[Union[bytes, str]],
    encoding: str = "utf-8",
    errors: str = "replace",
) -> str:
    """Drain an async stream to completion and decode it as text.

    Undecodable bytes are replaced by default, so binary content never fails
    to drain.

    Args:
        stream: Async iterable yielding bytes (or already-decoded str chunks)
        encoding: Text encoding used for byte chunks
        errors: Decoding error handler passed to bytes.decode

    Returns:
        The full stream content as a single string
    """
    chunks = []
    async for chunk in stream:
        if isinstance(chunk, str):
            chunk = chunk.encode(encoding)
        chunks.append(chunk)

    return b"".join(chunks).decode(encoding, errors=errors)
