import logging
import subprocess

import pytest

from slbroadcast.config import Config
from slbroadcast.modules import ClusterDirectory, CommandError, NotificationSender

PLACEHOLDER = "00000000-0000-0000-0000-000000000000"


class FakeDirectory(ClusterDirectory):
    def __init__(self, clusters=None, external_ids=None):
        self.clusters = clusters or []
        self.external_ids = external_ids or {}
        self.list_calls = []
        self.resolved = []

    def list_clusters(self, filters):
        self.list_calls.append(list(filters))
        return list(self.clusters)

    def resolve_external_id(self, cluster_id):
        self.resolved.append(cluster_id)
        return self.external_ids.get(cluster_id)


class FakeSender(NotificationSender):
    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.previews = []
        self.sends = []

    def preview(self, template, params):
        self.previews.append((template, list(params)))

    def send(self, template, params, external_id):
        if external_id == self.fail_on:
            raise CommandError(["osdctl", "servicelog", "post"], 1)
        self.sends.append((template, list(params), external_id))


class FakeRun:
    """Stand-in for subprocess.run that answers by argv prefix."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def respond(self, prefix, stdout="", returncode=0):
        self.responses.append((list(prefix), stdout, returncode))

    def calls_to(self, *prefix):
        return [c for c in self.calls if c[:len(prefix)] == list(prefix)]

    def __call__(self, args, capture_output=False, text=False, **kwargs):
        args = list(args)
        self.calls.append(args)
        for prefix, stdout, returncode in self.responses:
            if args[:len(prefix)] == prefix:
                return subprocess.CompletedProcess(
                    args, returncode, stdout if capture_output else None, "" if capture_output else None
                )
        return subprocess.CompletedProcess(args, 0, "" if capture_output else None, "" if capture_output else None)


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(Config, "OCM_BIN", "ocm")
    monkeypatch.setattr(Config, "OSDCTL_BIN", "osdctl")
    monkeypatch.setattr(Config, "PLACEHOLDER_UUID", PLACEHOLDER)
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    yield
    # handlers hold on to the stdout of the run that created them
    logging.getLogger("slbroadcast").handlers.clear()


@pytest.fixture
def directory():
    return FakeDirectory()


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def fake_run(monkeypatch):
    runner = FakeRun()
    monkeypatch.setattr(subprocess, "run", runner)
    return runner
