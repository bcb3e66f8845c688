"""Pytest fixtures shared by the flow splitter tests."""

import pytest

import log
from flow_store import FlowRecord, FlowSet


@pytest.fixture(autouse=True)
def isolated_log(tmp_path_factory, monkeypatch):
    """Send log output to a throwaway folder."""
    log_file = tmp_path_factory.mktemp("logs") / "split.log"
    monkeypatch.setattr(log, "LOG_FILE", log_file)
    monkeypatch.setattr(log, "first_line", True)
    yield log_file


@pytest.fixture
def sample_flows():
    """A small flows document: two tabs, one subflow, one config node."""
    return [
        {"id": "t1", "type": "tab", "label": "Main Flow"},
        {"id": "n1", "type": "inject", "z": "t1", "name": "tick"},
        {"id": "t2", "type": "tab", "label": "Alerts"},
        {"id": "n2", "type": "debug", "z": "t2"},
        {"id": "s1", "type": "subflow", "name": "Retry", "in": [], "out": []},
        {"id": "n3", "type": "delay", "z": "s1"},
        {"id": "c1", "type": "mqtt-broker", "name": "local broker", "broker": "localhost"},
        {"id": "n4", "type": "mqtt in", "z": "t1", "broker": "c1"},
    ]


@pytest.fixture
def sample_flow_set():
    return FlowSet(categories={
        "tabs": [
            FlowRecord("main", [{"id": "t1", "type": "tab"}, {"id": "n1", "z": "t1"}]),
        ],
        "subflows": [
            FlowRecord("retry", [{"id": "s1", "type": "subflow"}]),
        ],
        "config-nodes": [
            FlowRecord("broker", {"id": "c1", "type": "mqtt-broker"}),
        ],
    })
