import logging

import pytest

import merlin
import merlin.testing


class _SuiteUtils:
    """Assorted utilities shared by the test suite."""

    @staticmethod
    def create_req(options=None, **environ_kwargs):
        return merlin.testing.create_req(options=options, **environ_kwargs)

    @staticmethod
    def create_resp(options=None):
        return merlin.testing.create_resp(options=options)

    @staticmethod
    def create_extended(options=None, req_options=None, **environ_kwargs):
        req = merlin.testing.create_req(options=req_options, **environ_kwargs)
        return merlin.ExtendedResponse(req, options=options)


@pytest.fixture(scope='session')
def util():
    return _SuiteUtils()


@pytest.fixture()
def resp(util):
    return util.create_extended()


@pytest.fixture()
def merlin_logs(caplog):
    caplog.set_level(logging.DEBUG, logger='merlin')
    return caplog
