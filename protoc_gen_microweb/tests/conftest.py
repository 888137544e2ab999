"""Pytest fixtures building protobuf descriptors and plugin requests"""

import pytest
from google.api import annotations_pb2
from google.protobuf import descriptor_pb2
from google.protobuf.compiler import plugin_pb2

from protoc_gen_microweb.pipeline import GeneratorConfig, PipelineGenerator

EMPTY_PROTO = "google/protobuf/empty.proto"
GREETER_PROTO = "helloworld/helloworld.proto"


def add_method(
    service,
    name,
    input_type,
    output_type,
    verb=None,
    pattern="",
    body="",
    server_streaming=False,
    client_streaming=False,
):
    """Add a method to a ServiceDescriptorProto, with an optional google.api.http rule"""
    method = service.method.add(
        name=name,
        input_type=input_type,
        output_type=output_type,
        server_streaming=server_streaming,
        client_streaming=client_streaming,
    )
    if verb:
        rule = method.options.Extensions[annotations_pb2.http]
        setattr(rule, verb.lower(), pattern)
        rule.body = body
    return method


def build_empty_file():
    fdp = descriptor_pb2.FileDescriptorProto(
        name=EMPTY_PROTO,
        package="google.protobuf",
        syntax="proto3",
    )
    fdp.options.go_package = "google.golang.org/protobuf/types/known/emptypb"
    fdp.message_type.add(name="Empty")
    return fdp


def build_greeter_file(input_type=".helloworld.HelloRequest", output_type=".helloworld.HelloReply"):
    """helloworld.Greeter with SayHello bound to GET /v1/hello/{name}"""
    fdp = descriptor_pb2.FileDescriptorProto(
        name=GREETER_PROTO,
        package="helloworld",
        syntax="proto3",
        dependency=[EMPTY_PROTO],
    )
    fdp.options.go_package = "github.com/example/helloworld;helloworld"

    request = fdp.message_type.add(name="HelloRequest")
    request.field.add(
        name="name",
        number=1,
        type=descriptor_pb2.FieldDescriptorProto.TYPE_STRING,
        label=descriptor_pb2.FieldDescriptorProto.LABEL_OPTIONAL,
        json_name="name",
    )
    fdp.message_type.add(name="HelloReply")

    service = fdp.service.add(name="Greeter")
    add_method(service, "SayHello", input_type, output_type, "GET", "/v1/hello/{name}")
    return fdp


def build_request(*files, targets=None, parameter=""):
    request = plugin_pb2.CodeGeneratorRequest(parameter=parameter)
    request.proto_file.extend(files)
    request.file_to_generate.extend(targets if targets is not None else [files[-1].name])
    return request


@pytest.fixture
def empty_file():
    return build_empty_file()


@pytest.fixture
def greeter_file():
    return build_greeter_file()


@pytest.fixture
def make_greeter_file():
    return build_greeter_file


@pytest.fixture
def make_request():
    return build_request


@pytest.fixture
def method_builder():
    return add_method


@pytest.fixture
def config():
    """Configuration without gofmt so output does not depend on the machine"""
    return GeneratorConfig(gofmt=False)


@pytest.fixture
def generator(config):
    return PipelineGenerator(config)
