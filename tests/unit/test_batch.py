"""
Unit tests for the batch processor.
"""

import asyncio

import pytest

from decoder_suite.batch import (
    CancellationToken,
    output_filename,
    process_batch,
    process_batch_async,
    process_file,
    split_chunks,
)
from decoder_suite.errors import BatchCancelledError, MalformedEncodedInput
from decoder_suite.models import ConversionOptions
from decoder_suite.registry import Scheme


class TestSplitChunks:
    """Tests for newline chunking."""

    def test_empty_text_has_no_chunks(self):
        assert split_chunks("") == []

    def test_trailing_empty_chunk_kept(self):
        assert split_chunks("a\nb\n") == ["a", "b", ""]

    def test_single_line(self):
        assert split_chunks("abc") == ["abc"]


class TestProcessBatch:
    """Tests for the synchronous batch processor."""

    def test_each_chunk_followed_by_newline(self):
        assert process_batch("sos\nhi", Scheme.MORSE) == "... --- ...\n.... ..\n"

    def test_trailing_newline_preserved_as_chunk(self):
        assert process_batch("a\n", Scheme.MORSE) == ".-\n\n"

    def test_progress_sequence(self):
        """Test progress is non-decreasing and ends at 1.0."""
        calls = []
        process_batch("a\nb\nc\nd", Scheme.ROT13, on_progress=calls.append)
        assert calls == [0.25, 0.5, 0.75, 1.0]
        assert calls == sorted(calls)

    def test_empty_input_no_progress(self):
        calls = []
        assert process_batch("", Scheme.BASE64, on_progress=calls.append) == ""
        assert calls == []

    def test_decode_direction(self):
        options = ConversionOptions(reverse=True)
        assert process_batch("SGk=\nSGk=", Scheme.BASE64, options) == "Hi\nHi\n"

    def test_chunk_failure_aborts_batch(self):
        """Test that one bad chunk fails the whole batch."""
        calls = []
        with pytest.raises(MalformedEncodedInput):
            process_batch("SGk=\n???\nSGk=", Scheme.BASE64, ConversionOptions(reverse=True), calls.append)
        assert calls == [pytest.approx(1 / 3)]

    def test_cancellation_between_chunks(self):
        token = CancellationToken()
        calls = []

        def on_progress(fraction):
            calls.append(fraction)
            token.cancel()

        with pytest.raises(BatchCancelledError) as excinfo:
            process_batch("a\nb\nc", Scheme.MORSE, on_progress=on_progress, cancel_token=token)
        assert excinfo.value.completed == 1
        assert excinfo.value.total == 3
        assert len(calls) == 1

    def test_cancelled_before_start(self):
        token = CancellationToken()
        token.cancel()
        assert token.cancelled
        with pytest.raises(BatchCancelledError):
            process_batch("a", Scheme.MORSE, cancel_token=token)


class TestProcessBatchAsync:
    """Tests for the coroutine batch processor."""

    @pytest.mark.asyncio
    async def test_matches_sync_output(self, multiline_text):
        calls = []
        result = await process_batch_async(multiline_text, Scheme.NATO, on_progress=calls.append)
        assert result == process_batch(multiline_text, Scheme.NATO)
        assert calls[-1] == 1.0

    @pytest.mark.asyncio
    async def test_token_cancellation(self):
        token = CancellationToken()
        token.cancel()
        with pytest.raises(BatchCancelledError):
            await process_batch_async("a\nb", Scheme.MORSE, cancel_token=token)

    @pytest.mark.asyncio
    async def test_task_cancellation(self):
        """Test that cancelling the task stops processing between chunks."""
        calls = []
        task = asyncio.create_task(
            process_batch_async("a\n" * 1000, Scheme.MORSE, on_progress=calls.append)
        )
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert len(calls) <= 2


class TestFileConversion:
    """Tests for output naming and file conversion."""

    def test_output_filename(self):
        assert output_filename("/tmp/notes.txt", Scheme.MORSE, False) == "notes_Morse Code_encoded.txt"
        assert output_filename("report.md", Scheme.BASE64, True) == "report_Base64_decoded.txt"

    def test_process_file(self, temp_text_file, tmp_path):
        calls = []
        out_path = process_file(temp_text_file, Scheme.MORSE, on_progress=calls.append, output_dir=tmp_path / "out")
        assert out_path.name == "notes_Morse Code_encoded.txt"
        assert out_path.read_text(encoding="utf-8") == "... --- ...\n.... . .-.. .-.. ---   .-- --- .-. .-.. -..\n.- -... -.-.\n\n"
        assert calls[-1] == 1.0

    def test_process_file_decode(self, tmp_path):
        source = tmp_path / "secret.txt"
        source.write_text("Khoor\nZruog", encoding="utf-8")
        out_path = process_file(source, Scheme.CAESAR, ConversionOptions(reverse=True, caesar_shift=3), output_dir=tmp_path)
        assert out_path.name == "secret_Caesar Cipher_decoded.txt"
        assert out_path.read_text(encoding="utf-8") == "Hello\nWorld\n"
