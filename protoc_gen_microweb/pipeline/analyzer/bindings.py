"""
HTTP binding extraction from `google.api.http` method options.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from google.api import annotations_pb2, http_pb2
from google.protobuf import descriptor_pb2
from google.protobuf.message import DecodeError

logger = logging.getLogger(__name__)


class Verb(str, Enum):
    """HTTP verbs a rule can bind to, in selection priority order."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Binding:
    """One HTTP route for an RPC method."""

    verb: Verb
    pattern: str
    body: str = ""


@dataclass(frozen=True)
class RuleSlots:
    """The verb patterns of an HttpRule, one slot per verb.

    An HttpRule on the wire only keeps one pattern, but the slots are
    modelled independently so selection never depends on which field the
    decoder happened to keep.
    """

    patterns: Mapping[Verb, str]
    body: str = ""

    @staticmethod
    def from_rule(rule: http_pb2.HttpRule) -> RuleSlots:
        return RuleSlots(
            patterns={
                Verb.GET: rule.get,
                Verb.POST: rule.post,
                Verb.PUT: rule.put,
                Verb.PATCH: rule.patch,
                Verb.DELETE: rule.delete,
            },
            body=rule.body,
        )


def select_binding(slots: RuleSlots) -> Binding | None:
    """
    Pick the binding of a rule.

    The first verb, in `Verb` order, with a non-empty pattern wins. Custom
    patterns and additional bindings are not routed.

    Args:
        slots: The rule's verb patterns and body selector

    Returns:
        The selected binding, or None if no verb slot is set
    """
    for verb in Verb:
        pattern = slots.patterns.get(verb, "")
        if pattern:
            return Binding(verb=verb, pattern=pattern, body=slots.body)
    return None


def extract_binding(options: bytes) -> Binding | None:
    """
    Extract the HTTP binding from serialized MethodOptions.

    A method without the `google.api.http` option, or whose options cannot
    be decoded, is simply not routed.

    Args:
        options: Serialized `google.protobuf.MethodOptions`

    Returns:
        The method's binding, or None
    """
    method_options = descriptor_pb2.MethodOptions()
    try:
        method_options.ParseFromString(options)
    except DecodeError as e:
        logger.debug("Could not decode method options: %s", e)
        return None

    if not method_options.HasExtension(annotations_pb2.http):
        return None

    rule = method_options.Extensions[annotations_pb2.http]
    return select_binding(RuleSlots.from_rule(rule))
