import pytest

from reeks import (
    ConfigValue,
    KeyedStream,
    Pipeline,
    PipelineCompositionError,
    Stage,
    filter_,
    map_,
    reduce_,
    stage,
    sum_reduce_func,
    to_array,
    wrap_batch,
)
from reeks.config import Config
from reeks.core.stage import lazy_operation, operation_kind, terminal_operation


def double(key, value):
    return value * 2


def test_pipeline_creation():
    p = Pipeline()
    assert isinstance(p, Pipeline)
    assert p.stages == []


def test_stage_names_drop_trailing_underscore():
    assert stage(map_, double).name == "map"
    assert stage(filter_, double).name == "filter"
    assert stage(wrap_batch, 2, name="chunks").name == "chunks"


def test_stage_types_come_from_operations():
    assert stage(map_, double).stage_type == "lazy"
    assert stage(wrap_batch, 2).stage_type == "lazy"
    assert stage(reduce_, sum_reduce_func(), 0).is_terminal


def test_operation_markers():
    @terminal_operation
    def count(items):
        return sum(1 for _ in items)

    @lazy_operation
    def identity(items):
        return items

    assert operation_kind(count) == "terminal"
    assert operation_kind(identity) == "lazy"
    assert operation_kind(lambda items: items) == "lazy"


def test_stage_requires_callable():
    with pytest.raises(TypeError):
        Stage("not callable")


def test_pipeline_composition():
    p = stage(map_, double) | stage(filter_, lambda k, v: v > 2)
    assert isinstance(p, Pipeline)
    assert [s.name for s in p.stages] == ["map", "filter"]


def test_rshift_is_alias_for_or():
    p = stage(map_, double) >> stage(map_, double)
    assert len(p.stages) == 2


def test_or_does_not_mutate_operands():
    base = Pipeline([stage(map_, double)])
    extended = base | stage(map_, double)
    assert len(base.stages) == 1
    assert len(extended.stages) == 2


def test_pipeline_add_is_in_place():
    p = Pipeline()
    assert p.add(stage(map_, double)) is p
    assert len(p.stages) == 1


def test_composing_pipelines_flattens_stages():
    left = stage(map_, double) | stage(map_, double)
    right = stage(filter_, lambda k, v: True) | stage(wrap_batch, 2)
    assert len((left | right).stages) == 4


def test_nothing_can_follow_terminal_stage():
    terminal = stage(to_array, lambda k, v: k)
    with pytest.raises(PipelineCompositionError):
        terminal | stage(map_, double)
    with pytest.raises(PipelineCompositionError):
        Pipeline([terminal, stage(map_, double)])


def test_composition_error_is_a_type_error():
    with pytest.raises(TypeError):
        Pipeline() | "not a stage"


def test_run_lazy_pipeline_returns_keyed_stream():
    p = stage(map_, double) | stage(filter_, lambda k, v: v > 2)
    result = p.run([1, 2, 3])
    assert isinstance(result, KeyedStream)
    assert list(result) == [(0, 4), (1, 6)]


def test_run_terminal_pipeline_returns_value():
    p = stage(map_, double) | stage(reduce_, sum_reduce_func(), 0)
    assert p.run([1, 2, 3]) == 12


def test_collect_materializes_pairs():
    p = Pipeline([stage(map_, double, keep_key=False)])
    assert p.collect({"a": 1, "b": 2}) == [(0, 2), (1, 4)]


def test_empty_pipeline_yields_source_pairs():
    assert Pipeline().collect(["x", "y"]) == [(0, "x"), (1, "y")]


def test_single_stage_run_and_collect():
    assert stage(reduce_, sum_reduce_func(), 10).run([1, 2]) == 13
    assert stage(map_, double).collect([5]) == [(0, 10)]


def test_config_value_defaults_without_config():
    s = stage(wrap_batch, ConfigValue("batch.size", 2))
    assert s.collect([1, 2, 3]) == [(0, {0: 1, 1: 2}), (1, {2: 3})]


def test_config_value_resolves_against_config():
    s = stage(wrap_batch, batch_size=ConfigValue("batch.size", 2))
    result = s.apply_to([1, 2, 3], Config({"batch": {"size": 3}}))
    assert list(result) == [(0, {0: 1, 1: 2, 2: 3})]


def test_visualize_lists_stages_in_order():
    p = stage(map_, double) | stage(reduce_, sum_reduce_func(), 0)
    dot = p.visualize()
    assert dot.startswith("digraph G {")
    assert '"stage_0" [label="map", shape=box];' in dot
    assert '"stage_1" [label="reduce", shape=doubleoctagon];' in dot
    assert '"stage_0" -> "stage_1";' in dot


def test_pipeline_repr():
    p = Pipeline([stage(map_, double), stage(wrap_batch, 2)], name="demo")
    assert repr(p) == "Pipeline(name='demo', stages=[map | wrap_batch])"
