import pytest
from file_handler_chain.chain_builder import build_chain
from file_handler_chain.errors import ConfigurationError
from file_handler_chain.handler import ChainLink

from fakes import RecordingHandler


@pytest.mark.unit
def test_build_preserves_length_and_order():
    handlers = [RecordingHandler("a", ".a"), RecordingHandler("b", ".b"), RecordingHandler("c", ".c")]
    head = build_chain(handlers)
    assert isinstance(head, ChainLink)
    assert len(head) == 3
    assert head.handlers() == handlers
    assert head.handler is handlers[0]
    assert head.successor.handler is handlers[1]
    assert head.successor.successor.handler is handlers[2]
    assert head.successor.successor.successor is None


@pytest.mark.unit
def test_build_single_handler_is_terminal():
    only = RecordingHandler("pdf", ".pdf")
    head = build_chain([only])
    assert head.successor is None
    assert len(head) == 1


@pytest.mark.unit
def test_build_empty_raises_configuration_error():
    with pytest.raises(ConfigurationError, match="No handlers available"):
        build_chain([])


@pytest.mark.unit
def test_build_accepts_any_iterable_sequence():
    head = build_chain(tuple(RecordingHandler(n, "." + n) for n in "xy"))
    assert [h.name for h in head.handlers()] == ["x", "y"]


@pytest.mark.unit
def test_relinking_a_built_link_is_a_configuration_error():
    head = build_chain([RecordingHandler("a", ".a"), RecordingHandler("b", ".b")])
    with pytest.raises(ConfigurationError, match="already linked"):
        head._link(ChainLink(RecordingHandler("c", ".c")))
    assert head.successor.handler.name == "b"


@pytest.mark.unit
def test_same_handler_instances_can_back_separate_chains():
    a, b = RecordingHandler("a", ".a"), RecordingHandler("b", ".b")
    first = build_chain([a, b])
    second = build_chain([b, a])
    assert [h.name for h in first.handlers()] == ["a", "b"]
    assert [h.name for h in second.handlers()] == ["b", "a"]
