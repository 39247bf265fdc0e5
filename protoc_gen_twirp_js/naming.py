"""Convert schema identifiers to names used in generated JavaScript.

Pattern:
  - service  -> {CamelName}Client, exported as create{CamelName}Client
  - wire     -> {package}.{CamelName}
  - method   -> stub {lowerCamel}, wire method {CamelName}
  - file     -> {path minus .proto}_pb_twirp.js

Examples:
  service echo_service in package example -> EchoServiceClient, example.EchoService
  method  get_user                        -> getUser, "GetUser"
  file    api/v1/users.proto              -> api/v1/users_pb_twirp.js
  type    .example.v1.HelloResp           -> HelloResp
"""

from __future__ import annotations

from google.protobuf import descriptor_pb2

from .config import CLIENT_SUFFIX, MESSAGE_SUFFIX, SCHEMA_EXTENSIONS


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def camel_case(name: str) -> str:
    """Convert a snake_case identifier to UpperCamelCase.

    Follows the protoc-gen-go rules so names agree with Go Twirp servers:
    an underscore followed by a lower-case letter is dropped and the letter
    capitalised, a letter after a digit starts a new word, and a leading
    underscore becomes 'X'. Other characters are kept as they are.
    """
    if not name:
        return ""

    out: list[str] = []
    i = 0
    if name[0] == "_":
        out.append("X")
        i = 1

    while i < len(name):
        c = name[i]
        if c == "_" and i + 1 < len(name) and _is_lower(name[i + 1]):
            i += 1
            continue
        if _is_digit(c):
            out.append(c)
            i += 1
            continue
        out.append(c.upper() if _is_lower(c) else c)
        # Lower-case run following the word start
        while i + 1 < len(name) and _is_lower(name[i + 1]):
            i += 1
            out.append(name[i])
        i += 1

    return "".join(out)


def lower_first(name: str) -> str:
    """Lower-case the first character only."""
    return name[:1].lower() + name[1:]


def base_file_name(path: str) -> str:
    """Strip a recognised schema extension and append the message suffix."""
    for ext in SCHEMA_EXTENSIONS:
        if path.endswith(ext):
            path = path[: -len(ext)]
            break
    return path + MESSAGE_SUFFIX


def artifact_name(path: str) -> str:
    """Return the generated client file name for a schema file path."""
    return base_file_name(path) + CLIENT_SUFFIX


def message_module_path(path: str) -> str:
    """Return the require() path of the file's generated message module.

    The module sits beside the generated client, so only the last path
    segment is kept.
    """
    return "./" + base_file_name(path).rsplit("/", 1)[-1] + ".js"


def service_name(service: descriptor_pb2.ServiceDescriptorProto) -> str:
    return camel_case(service.name)


def client_name(service: descriptor_pb2.ServiceDescriptorProto) -> str:
    return service_name(service) + "Client"


def full_service_name(
    file: descriptor_pb2.FileDescriptorProto,
    service: descriptor_pb2.ServiceDescriptorProto,
) -> str:
    """Return the package-qualified name the server routes on."""
    name = service_name(service)
    if file.package:
        name = f"{file.package}.{name}"
    return name


def method_name(method: descriptor_pb2.MethodDescriptorProto) -> str:
    """Return the wire method name sent to the server."""
    return camel_case(method.name)


def stub_name(method: descriptor_pb2.MethodDescriptorProto) -> str:
    """Return the lowerCamelCase property name of the generated stub."""
    return lower_first(method_name(method))


def short_type_name(type_ref: str) -> str:
    """Return the last segment of a dotted type reference."""
    return type_ref.rsplit(".", 1)[-1]


def input_type_name(method: descriptor_pb2.MethodDescriptorProto) -> str:
    return short_type_name(method.input_type)


def output_type_name(method: descriptor_pb2.MethodDescriptorProto) -> str:
    return short_type_name(method.output_type)
