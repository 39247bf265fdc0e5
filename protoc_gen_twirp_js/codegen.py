"""Generate Twirp JavaScript clients from a protoc request.

One output file per file to generate: a header and import preamble rendered
from templates/header.js.j2, then one create<Service>Client factory per
service with a stub per method, in declaration order.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field

import jinja2
from google.protobuf import descriptor_pb2
from google.protobuf.compiler import plugin_pb2

from . import VERSION
from .comments import CommentIndex, DefinitionComments
from .config import GENERATOR_NAME, HEADER_TEMPLATE, RUNTIME_MODULE, TEMPLATE_DIR
from .emitter import Emitter
from .loader import select_files
from .logging import get_logger
from .naming import (
    artifact_name,
    client_name,
    full_service_name,
    input_type_name,
    message_module_path,
    method_name,
    output_type_name,
    stub_name,
)

logger = get_logger(__name__.rsplit(".", 1)[-1])


def quote(value: str) -> str:
    """Return a double-quoted JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)


def _template_env() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["quote"] = quote
    return env


@dataclass
class GenerationResult:
    """The plugin response plus requested files that were not in the request."""

    response: plugin_pb2.CodeGeneratorResponse
    missing: list[str] = field(default_factory=list)


class ClientGenerator:
    """Walks files, services and methods and writes client code."""

    def __init__(self, version: str = VERSION) -> None:
        self.version = version
        self.out = Emitter()
        self.comments = CommentIndex()
        self._header = _template_env().get_template(HEADER_TEMPLATE)

    def generate(self, request: plugin_pb2.CodeGeneratorRequest) -> GenerationResult:
        """Generate one client file per file to generate."""
        selection = select_files(request)
        for name in selection.missing:
            logger.warning("file to generate %s not found in request, skipping", name)

        self.comments = CommentIndex.build(request.proto_file)
        logger.debug("indexed %d commented definitions", len(self.comments))

        response = plugin_pb2.CodeGeneratorResponse()
        response.supported_features = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL
        for file in selection.files:
            response.file.add().CopyFrom(self.generate_file(file))

        return GenerationResult(response=response, missing=selection.missing)

    def generate_file(
        self, file: descriptor_pb2.FileDescriptorProto,
    ) -> plugin_pb2.CodeGeneratorResponse.File:
        header = self._header.render(
            generator=GENERATOR_NAME,
            version=self.version,
            source=file.name,
            runtime_module=RUNTIME_MODULE,
            message_module=message_module_path(file.name),
        )
        for line in header.splitlines():
            self.out.emit(line)

        if not file.service:
            logger.info("%s declares no services, writing header only", file.name)
        for service in file.service:
            self.generate_client(file, service)

        name = artifact_name(file.name)
        logger.info("generated %s (%d services)", name, len(file.service))
        return plugin_pb2.CodeGeneratorResponse.File(name=name, content=self.out.drain())

    def generate_client(
        self,
        file: descriptor_pb2.FileDescriptorProto,
        service: descriptor_pb2.ServiceDescriptorProto,
    ) -> None:
        c_name = client_name(service)

        self.out.emit("/**")
        comments = self.comments.service_comments(file, service)
        if comments is not None and comments.leading:
            self.print_comments(comments, " * ")
        else:
            self.out.emit(" * Creates a new ", c_name)
        self.out.emit(" */")
        self.out.emit(
            "module.exports.create", c_name,
            " = function(baseurl, extraHeaders, useJSON) {",
        )
        self.out.emit(
            "    var rpc = createClient(baseurl, ",
            quote(full_service_name(file, service)), ", ",
            quote(self.version), ", useJSON, ",
            "extraHeaders === undefined ? {} : extraHeaders);",
        )
        self.out.emit("    return {")

        last = len(service.method) - 1
        for i, method in enumerate(service.method):
            logger.debug(
                "%s.%s(%s) returns %s",
                c_name, method.name, input_type_name(method), output_type_name(method),
            )
            comments = self.comments.method_comments(file, service, method)
            if comments is not None and comments.leading:
                self.out.emit("        /**")
                self.print_comments(comments, "         * ")
                self.out.emit("         */")

            trailing_comma = "," if i != last else ""
            self.out.emit(
                "        ", stub_name(method),
                ": function(data) { return rpc(", quote(method_name(method)),
                ", data, pb.", output_type_name(method), "); }",
                trailing_comma,
            )

        self.out.emit("    }")
        self.out.emit("}")
        self.out.emit()

    def print_comments(self, comments: DefinitionComments, prefix: str) -> None:
        """Emit a leading comment line by line, dropping one leading space."""
        text = comments.leading
        if text.endswith("\n"):
            text = text[:-1]
        for line in text.split("\n"):
            if line.startswith(" "):
                line = line[1:]
            self.out.emit(prefix, line)


def generate(request: plugin_pb2.CodeGeneratorRequest) -> GenerationResult:
    """Run a fresh generator over one request."""
    return ClientGenerator().generate(request)
