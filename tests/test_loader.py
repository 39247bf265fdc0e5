"""Tests for request loading and file selection."""

from io import BytesIO

import pytest
from conftest import make_file, make_request
from google.protobuf.compiler import plugin_pb2

from protoc_gen_twirp_js.loader import (
    GeneratorError,
    load_request,
    parse_request,
    select_files,
    write_response,
)


class TestSelectFiles:
    """file_to_generate picks a subset of proto_file, in its own order."""

    def test_only_targets_selected(self):
        dep = make_file("dep.proto")
        main = make_file("main.proto")
        selection = select_files(make_request([dep, main], ["main.proto"]))
        assert [f.name for f in selection.files] == ["main.proto"]
        assert selection.missing == []

    def test_target_order_kept(self):
        files = [make_file(n) for n in ("a.proto", "b.proto", "c.proto")]
        selection = select_files(make_request(files, ["c.proto", "a.proto"]))
        assert [f.name for f in selection.files] == ["c.proto", "a.proto"]

    def test_missing_target_reported_not_raised(self):
        files = [make_file("a.proto")]
        selection = select_files(make_request(files, ["a.proto", "ghost.proto"]))
        assert [f.name for f in selection.files] == ["a.proto"]
        assert selection.missing == ["ghost.proto"]

    def test_file_without_services_selected(self):
        selection = select_files(make_request([make_file("empty.proto")], ["empty.proto"]))
        assert len(selection.files) == 1


class TestParseRequest:
    def test_round_trip(self, echo_request):
        request = parse_request(echo_request.SerializeToString())
        assert list(request.file_to_generate) == ["example.proto"]

    def test_no_files_to_generate(self):
        data = make_request([make_file("a.proto")], []).SerializeToString()
        with pytest.raises(GeneratorError, match="no files to generate"):
            parse_request(data)

    def test_garbage_input(self):
        with pytest.raises(GeneratorError):
            parse_request(b"\xff\xff\xff\xff")

    def test_load_from_stream(self, echo_request):
        request = load_request(stream=BytesIO(echo_request.SerializeToString()))
        assert request.proto_file[0].package == "example"

    def test_load_from_file(self, echo_request, tmp_path):
        path = tmp_path / "request.bin"
        path.write_bytes(echo_request.SerializeToString())
        assert load_request(path).proto_file[0].name == "example.proto"

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(GeneratorError, match="reading input"):
            load_request(tmp_path / "nope.bin")


class TestWriteResponse:
    def test_serialized(self):
        response = plugin_pb2.CodeGeneratorResponse()
        response.file.add(name="x_pb_twirp.js", content="// x\n")
        buf = BytesIO()
        write_response(response, buf)
        decoded = plugin_pb2.CodeGeneratorResponse.FromString(buf.getvalue())
        assert decoded.file[0].name == "x_pb_twirp.js"
        assert decoded.file[0].content == "// x\n"
