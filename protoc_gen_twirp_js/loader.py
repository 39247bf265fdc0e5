"""Read the protoc request and write the response.

protoc writes a serialized CodeGeneratorRequest to the plugin's stdin and
expects a CodeGeneratorResponse on stdout. A captured request can be
replayed from a file instead.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from google.protobuf import descriptor_pb2
from google.protobuf.compiler import plugin_pb2
from google.protobuf.message import DecodeError


class GeneratorError(RuntimeError):
    """Raised when the plugin request cannot be read or is empty."""


@dataclass
class FileSelection:
    """Files to generate for, plus requested names with no matching file."""

    files: list[descriptor_pb2.FileDescriptorProto] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


def parse_request(data: bytes) -> plugin_pb2.CodeGeneratorRequest:
    """Decode a serialized CodeGeneratorRequest."""
    try:
        request = plugin_pb2.CodeGeneratorRequest.FromString(data)
    except DecodeError as exc:
        raise GeneratorError(f"parsing input proto: {exc}") from exc
    if not request.file_to_generate:
        raise GeneratorError("no files to generate")
    return request


def load_request(
    path: Path | None = None, stream: BinaryIO | None = None,
) -> plugin_pb2.CodeGeneratorRequest:
    """Load the request from a file, or from stdin when no path is given."""
    try:
        if path is not None:
            data = Path(path).read_bytes()
        else:
            data = (stream or sys.stdin.buffer).read()
    except OSError as exc:
        raise GeneratorError(f"reading input: {exc}") from exc
    return parse_request(data)


def select_files(request: plugin_pb2.CodeGeneratorRequest) -> FileSelection:
    """Pick the files named in file_to_generate, in that order.

    Names without a matching proto_file are collected in ``missing``
    rather than raised.
    """
    by_name: dict[str, descriptor_pb2.FileDescriptorProto] = {}
    for proto_file in request.proto_file:
        # First declaration wins, as in a linear scan
        by_name.setdefault(proto_file.name, proto_file)

    selection = FileSelection()
    for name in request.file_to_generate:
        proto_file = by_name.get(name)
        if proto_file is None:
            selection.missing.append(name)
        else:
            selection.files.append(proto_file)
    return selection


def write_response(
    response: plugin_pb2.CodeGeneratorResponse, stream: BinaryIO | None = None,
) -> None:
    """Serialize the response to stdout (or the given stream)."""
    out = stream or sys.stdout.buffer
    out.write(response.SerializeToString(deterministic=True))
    out.flush()
