import logging
import sys

import click
from google.protobuf.compiler import plugin_pb2
from google.protobuf.message import DecodeError

from .pipeline import generate_response


@click.command()
@click.option(
    "--request",
    "-r",
    "request_file",
    default="-",
    type=click.File("rb"),
    help="Read a serialized CodeGeneratorRequest from this file instead of stdin",
)
@click.option(
    "--output",
    "-o",
    "output_file",
    default="-",
    type=click.File("wb"),
    help="Write the serialized CodeGeneratorResponse to this file instead of stdout",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug messages to stderr")
def protoc_gen_microweb(request_file, output_file, verbose):
    """protoc plugin generating go-micro HTTP handlers (*.web.go)."""
    # stdout carries the plugin protocol, logs go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="protoc-gen-microweb: %(levelname)s %(name)s: %(message)s",
    )

    request = plugin_pb2.CodeGeneratorRequest()
    try:
        request.ParseFromString(request_file.read())
    except DecodeError as e:
        raise click.ClickException(f"could not parse CodeGeneratorRequest: {e}") from e

    response = generate_response(request)
    output_file.write(response.SerializeToString())
    output_file.flush()
