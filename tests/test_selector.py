"""Tests for representation selection and configuration-time binding."""

from __future__ import annotations

import dataclasses
import threading

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from ulidkit import (
    FormatError,
    FormatErrorReason,
    RepresentationKind,
    SelectorConfig,
    SelectorHandle,
    ULIDValue,
    UnsupportedKindError,
    configure,
    configure_from,
    decode_bytes,
    decode_string,
    encode_bytes,
    encode_string,
    identity,
    parse,
    transform,
)

from .conftest import SAMPLE_BYTES, SAMPLE_STRING, SAMPLE_VALUE


class TestConfigure:
    """Tests for configure()."""

    def test_string_kind_binds_string_codec(self) -> None:
        """String kind binds encode_string/decode_string."""
        handle = configure(RepresentationKind.string)
        assert handle.kind is RepresentationKind.string
        assert handle.encode is encode_string
        assert handle.decode is decode_string

    def test_bytes_kind_binds_byte_codec(self) -> None:
        """Bytes kind binds encode_bytes/decode_bytes."""
        handle = configure(RepresentationKind.bytes)
        assert handle.encode is encode_bytes
        assert handle.decode is decode_bytes

    def test_native_kind_binds_identity(self) -> None:
        """Native kind encodes with identity."""
        handle = configure(RepresentationKind.native)
        assert handle.encode is identity

    @pytest.mark.parametrize("name", ["string", "STRING", " String "])
    def test_accepts_kind_names(self, name: str) -> None:
        """Kind names are accepted case-insensitively."""
        assert configure(name).kind is RepresentationKind.string

    @pytest.mark.parametrize("bogus", ["uuid", "", "str", 3, None, bytes, object()])
    def test_unsupported_kind_fails_at_configuration(self, bogus: object) -> None:
        """Unknown kinds raise UnsupportedKindError carrying the request."""
        with pytest.raises(UnsupportedKindError) as exc_info:
            configure(bogus)  # type: ignore[arg-type]
        assert exc_info.value.requested_kind is bogus

    def test_unsupported_kind_is_logged(self) -> None:
        """Rejected configuration emits a warning event."""
        with capture_logs() as logs:
            with pytest.raises(UnsupportedKindError):
                configure("uuid")
        assert any(
            entry["event"] == "selector.unsupported_kind" and entry["log_level"] == "warning" for entry in logs
        )

    def test_configured_kind_is_logged(self) -> None:
        """Successful configuration emits a debug event."""
        with capture_logs() as logs:
            configure("bytes")
        assert {"event": "selector.configured", "log_level": "debug", "kind": "bytes"} in logs

    def test_handle_is_immutable(self) -> None:
        """A configured handle cannot be rebound."""
        handle = configure("string")
        with pytest.raises(dataclasses.FrozenInstanceError):
            handle.kind = RepresentationKind.bytes  # type: ignore[misc]


class TestTransformAndParse:
    """Tests for transform()/parse() on configured handles."""

    def test_string_transform_matches_direct_encode(self) -> None:
        """configure(string) then transform equals encode_string."""
        handle = configure("string")
        assert transform(handle, SAMPLE_VALUE) == encode_string(SAMPLE_VALUE) == SAMPLE_STRING
        assert parse(handle, SAMPLE_STRING) == SAMPLE_VALUE

    def test_bytes_transform_matches_direct_encode(self) -> None:
        """configure(bytes) then transform equals encode_bytes."""
        handle = configure("bytes")
        assert transform(handle, SAMPLE_VALUE) == SAMPLE_BYTES
        assert parse(handle, SAMPLE_BYTES) == SAMPLE_VALUE

    def test_native_passes_value_through(self) -> None:
        """Native kind returns the same value both ways."""
        handle = configure("native")
        assert transform(handle, SAMPLE_VALUE) is SAMPLE_VALUE
        assert parse(handle, SAMPLE_VALUE) is SAMPLE_VALUE

    def test_native_parse_rejects_other_types(self) -> None:
        """Native kind only parses ULIDValue instances."""
        with pytest.raises(TypeError):
            configure("native").parse(SAMPLE_STRING)

    def test_parse_propagates_format_error(self) -> None:
        """Decode failures reach the caller unchanged."""
        with pytest.raises(FormatError) as exc_info:
            parse(configure("bytes"), b"\x00" * 15)
        assert exc_info.value.reason is FormatErrorReason.bad_length

        with pytest.raises(FormatError) as exc_info:
            parse(configure("string"), "I" * 26)
        assert exc_info.value.reason is FormatErrorReason.bad_character

    def test_handle_methods_match_functions(self) -> None:
        """Handle methods and module functions are interchangeable."""
        handle = configure("string")
        assert handle.transform(SAMPLE_VALUE) == transform(handle, SAMPLE_VALUE)
        assert handle.parse(SAMPLE_STRING) == parse(handle, SAMPLE_STRING)

    def test_shared_handle_across_threads(self) -> None:
        """Concurrent use of one handle produces independent, correct results."""
        handle = configure("string")
        values = [ULIDValue.from_int(n * 7919) for n in range(200)]
        results: dict[int, list[str]] = {}

        def worker(index: int) -> None:
            results[index] = [handle.transform(value) for value in values]

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        expected = [encode_string(value) for value in values]
        assert all(result == expected for result in results.values())
        assert len(results) == 8


class TestSelectorConfig:
    """Tests for the pydantic selector configuration."""

    def test_validates_kind_from_dict(self) -> None:
        """Configuration dicts validate into a kind."""
        config = SelectorConfig.model_validate({"kind": "Bytes"})
        assert config.kind is RepresentationKind.bytes
        assert isinstance(configure_from(config), SelectorHandle)

    def test_validates_kind_from_json(self) -> None:
        """JSON configuration is accepted."""
        config = SelectorConfig.model_validate_json('{"kind": "native"}')
        assert configure_from(config).kind is RepresentationKind.native

    def test_rejects_unknown_kind(self) -> None:
        """Unknown kinds fail validation."""
        with pytest.raises(ValidationError):
            SelectorConfig.model_validate({"kind": "uuid"})

    def test_is_frozen(self) -> None:
        """Configuration cannot be mutated after validation."""
        config = SelectorConfig(kind=RepresentationKind.string)
        with pytest.raises(ValidationError):
            config.kind = RepresentationKind.bytes  # type: ignore[misc]
