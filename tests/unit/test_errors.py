import pickle

from lib.contracts.errors import CodeLocation, InvalidParameter, NotFound
from lib.telemetry import errors as error_sink


def test_code_location_domain_preface():
    location = CodeLocation("ConfigStore")
    assert CodeLocation.domain_preface == "com.blanknetwork."
    assert location.domain == "com.blanknetwork.ConfigStore"


def test_capture_records_file_line_and_function():
    location = CodeLocation.capture("Tester")
    filename, line, function = location.detail.rsplit(",", 2)
    assert filename.endswith("test_errors.py")
    assert int(line) > 0
    assert function == "test_capture_records_file_line_and_function"


def test_error_codes():
    assert InvalidParameter("bad", parameter="key").code == "invalid_parameter"
    assert str(NotFound("missing", key="api")) == "not_found:missing"


def test_error_is_delivered_once(reported):
    error = NotFound("missing", key="api")
    error_sink.report_error(error)
    error_sink.report_error(error)
    assert len(reported) == 1
    assert reported[0] is error


def test_unregistered_sink_receives_nothing():
    seen = []
    error_sink.register_sink(seen.append)
    error_sink.unregister_sink(seen.append)
    error_sink.report_error(NotFound("missing"))
    assert seen == []


def test_failing_sink_does_not_stop_delivery(reported):
    def broken(error):
        raise RuntimeError("sink down")

    error_sink.register_sink(broken)
    error_sink.register_sink(reported.append)
    error = NotFound("missing", key="api")
    error_sink.report_error(error)
    assert len(reported) == 1
    assert reported[0] is error


def test_store_lookup_survives_failing_sink(reported):
    from apps.network import ConfigStore

    def broken(error):
        raise RuntimeError("sink down")

    error_sink.register_sink(broken)
    result = ConfigStore().lookup("x")
    assert isinstance(result.error, NotFound)


def test_errors_behave_like_exceptions():
    error = NotFound("missing", CodeLocation("ConfigStore", "f.py,1,lookup"), key="api")
    assert error.args == ("missing",)
    assert {error}
    assert error != NotFound("missing", key="api")
    restored = pickle.loads(pickle.dumps(error))
    assert isinstance(restored, NotFound)
    assert restored.reason == "missing"
    assert restored.key == "api"
    assert restored.location == error.location
