#!/usr/bin/env python3

from click.testing import CliRunner
from google.protobuf.compiler import plugin_pb2

from protoc_gen_microweb.protoc_gen_microweb import protoc_gen_microweb


def parse_response(output: bytes) -> plugin_pb2.CodeGeneratorResponse:
    response = plugin_pb2.CodeGeneratorResponse()
    response.ParseFromString(output)
    return response


class TestCli:
    """Test cases for the protoc plugin command"""

    def test_reads_stdin_and_writes_stdout(self, empty_file, greeter_file, make_request):
        request = make_request(empty_file, greeter_file, parameter="gofmt=false")

        result = CliRunner().invoke(protoc_gen_microweb, [], input=request.SerializeToString())

        assert result.exit_code == 0
        response = parse_response(result.stdout_bytes)
        assert not response.error
        assert [f.name for f in response.file] == ["helloworld/helloworld.web.go"]

    def test_request_and_output_files(self, tmp_path, empty_file, greeter_file, make_request):
        request_path = tmp_path / "request.bin"
        response_path = tmp_path / "response.bin"
        request_path.write_bytes(make_request(empty_file, greeter_file, parameter="gofmt=false").SerializeToString())

        result = CliRunner().invoke(
            protoc_gen_microweb,
            ["--request", str(request_path), "--output", str(response_path)],
        )

        assert result.exit_code == 0
        response = parse_response(response_path.read_bytes())
        assert "RegisterGreeterWeb" in response.file[0].content

    def test_schema_errors_go_to_the_response(self, tmp_path, make_greeter_file, make_request):
        request = make_request(make_greeter_file(output_type=".helloworld.Missing"), parameter="gofmt=false")
        response_path = tmp_path / "response.bin"

        result = CliRunner().invoke(
            protoc_gen_microweb,
            ["--output", str(response_path)],
            input=request.SerializeToString(),
        )

        assert result.exit_code == 0
        assert "helloworld.Missing" in parse_response(response_path.read_bytes()).error

    def test_garbage_request(self):
        result = CliRunner().invoke(protoc_gen_microweb, [], input=b"\x0a\x05ab")

        assert result.exit_code == 1
        assert "could not parse CodeGeneratorRequest" in result.output

    def test_help(self):
        result = CliRunner().invoke(protoc_gen_microweb, ["--help"])

        assert result.exit_code == 0
        assert "--request" in result.output
