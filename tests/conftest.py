"""Shared fixtures: descriptor builders for plugin requests.

Requests are assembled with descriptor_pb2 directly, the same shape protoc
sends on stdin.
"""

from __future__ import annotations

from typing import Any

import pytest
from google.protobuf import descriptor_pb2
from google.protobuf.compiler import plugin_pb2


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def make_file(
    name: str,
    package: str = "",
    services: dict[str, list[tuple[str, str, str]]] | None = None,
    messages: list[str] | None = None,
) -> descriptor_pb2.FileDescriptorProto:
    """Build a FileDescriptorProto.

    ``services`` maps a service name to (method, input, output) triples,
    kept in insertion order.
    """
    file = descriptor_pb2.FileDescriptorProto(name=name, package=package)
    for message in messages or []:
        file.message_type.add(name=message)
    for service_name, methods in (services or {}).items():
        service = file.service.add(name=service_name)
        for method, input_type, output_type in methods:
            service.method.add(name=method, input_type=input_type, output_type=output_type)
    return file


def add_comment(
    file: descriptor_pb2.FileDescriptorProto, path: list[int], leading: str, **kwargs: Any,
) -> None:
    """Attach a SourceCodeInfo location with leading comments to ``path``."""
    location = file.source_code_info.location.add(path=path, leading_comments=leading)
    if "trailing" in kwargs:
        location.trailing_comments = kwargs["trailing"]
    for detached in kwargs.get("detached", []):
        location.leading_detached_comments.append(detached)


def make_request(
    files: list[descriptor_pb2.FileDescriptorProto], to_generate: list[str],
) -> plugin_pb2.CodeGeneratorRequest:
    request = plugin_pb2.CodeGeneratorRequest()
    request.file_to_generate.extend(to_generate)
    for file in files:
        request.proto_file.add().CopyFrom(file)
    return request


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def echo_file() -> descriptor_pb2.FileDescriptorProto:
    """example.proto: package example, service Echo { SayHello }."""
    return make_file(
        "example.proto",
        package="example",
        services={"Echo": [("SayHello", ".example.HelloReq", ".example.HelloResp")]},
        messages=["HelloReq", "HelloResp"],
    )


@pytest.fixture
def echo_request(echo_file) -> plugin_pb2.CodeGeneratorRequest:
    return make_request([echo_file], ["example.proto"])
