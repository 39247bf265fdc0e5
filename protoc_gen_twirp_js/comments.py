"""Index of source comments attached to services and methods.

protoc hands comments over as SourceCodeInfo locations keyed by a path of
field numbers and indices into the FileDescriptorProto:

  [6, i]        -> file.service[i]
  [6, i, 2, j]  -> file.service[i].method[j]

The index is built once from every file in the request and only read
afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from google.protobuf import descriptor_pb2

# FileDescriptorProto.service and ServiceDescriptorProto.method field numbers
_SERVICE_FIELD = descriptor_pb2.FileDescriptorProto.SERVICE_FIELD_NUMBER
_METHOD_FIELD = descriptor_pb2.ServiceDescriptorProto.METHOD_FIELD_NUMBER


@dataclass(frozen=True)
class DefinitionComments:
    leading: str = ""
    trailing: str = ""
    leading_detached: tuple[str, ...] = ()


ServiceKey = tuple[str, str]
MethodKey = tuple[str, str, str]


class CommentIndex:
    """Read-only lookup from (file, service[, method]) to comments."""

    def __init__(
        self,
        services: dict[ServiceKey, DefinitionComments] | None = None,
        methods: dict[MethodKey, DefinitionComments] | None = None,
    ) -> None:
        self._services = dict(services or {})
        self._methods = dict(methods or {})

    @classmethod
    def build(cls, files: Iterable[descriptor_pb2.FileDescriptorProto]) -> CommentIndex:
        """Index service and method comments of every file."""
        services: dict[ServiceKey, DefinitionComments] = {}
        methods: dict[MethodKey, DefinitionComments] = {}

        for file in files:
            for location in file.source_code_info.location:
                path = list(location.path)
                if len(path) < 2 or path[0] != _SERVICE_FIELD:
                    continue
                if path[1] >= len(file.service):
                    continue
                service = file.service[path[1]]
                comments = DefinitionComments(
                    leading=location.leading_comments,
                    trailing=location.trailing_comments,
                    leading_detached=tuple(location.leading_detached_comments),
                )

                if len(path) == 2:
                    services[(file.name, service.name)] = comments
                elif len(path) == 4 and path[2] == _METHOD_FIELD:
                    if path[3] >= len(service.method):
                        continue
                    method = service.method[path[3]]
                    methods[(file.name, service.name, method.name)] = comments

        return cls(services, methods)

    def service_comments(
        self,
        file: descriptor_pb2.FileDescriptorProto,
        service: descriptor_pb2.ServiceDescriptorProto,
    ) -> DefinitionComments | None:
        """Return comments recorded for a service, or None."""
        return self._services.get((file.name, service.name))

    def method_comments(
        self,
        file: descriptor_pb2.FileDescriptorProto,
        service: descriptor_pb2.ServiceDescriptorProto,
        method: descriptor_pb2.MethodDescriptorProto,
    ) -> DefinitionComments | None:
        """Return comments recorded for a method, or None."""
        return self._methods.get((file.name, service.name, method.name))

    def __len__(self) -> int:
        return len(self._services) + len(self._methods)
