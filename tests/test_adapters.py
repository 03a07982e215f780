from operette import Operation, OperationState, from_callback, operation_producer


def test_completion_callback_success():
    op = Operation()
    op.completion_callback(None, "NYC")
    assert op.result == "NYC"


def test_completion_callback_error():
    op = Operation()
    err = RuntimeError("boom")
    op.completion_callback(err)
    assert op.state is OperationState.FAILED
    assert op.error is err


def test_completion_callback_falsy_error_means_success():
    op = Operation()
    op.completion_callback(0, "value")
    assert op.result == "value"


def test_completion_callback_called_twice_keeps_first():
    op = Operation()
    op.completion_callback(None, "first")
    op.completion_callback("late error")
    assert op.state is OperationState.SUCCEEDED
    assert op.result == "first"


def test_from_callback_appends_adapter():
    def legacy(a, b, callback):
        callback(None, a + b)

    op = from_callback(legacy, 1, 2)
    assert op.result == 3
    assert op.name == "legacy"


def test_from_callback_passes_keyword_arguments():
    def legacy(callback, *, city):
        callback(None, city)

    op = from_callback(legacy, city="Philly", op_name="gps")
    assert op.result == "Philly"
    assert op.name == "gps"


def test_from_callback_sync_exception_fails_operation():
    def legacy(callback):
        raise KeyError("missing")

    op = from_callback(legacy)
    assert isinstance(op.error, KeyError)


def test_operation_producer_decorator():
    pending = []

    @operation_producer
    def lookup(key, callback):
        pending.append(callback)

    op = lookup("k")
    assert op.state is OperationState.PENDING
    assert lookup.__name__ == "lookup"

    pending[0](None, "v")
    assert op.result == "v"


def test_op_name_is_not_forwarded_to_producer():
    received = {}

    def legacy(callback, **kwargs):
        received.update(kwargs)
        callback(None, "ok")

    op = from_callback(legacy, op_name="labelled", region="us")
    assert received == {"region": "us"}
    assert op.name == "labelled"


def test_op_name_defaults_to_function_name():
    def lookup(callback):
        callback(None, 1)

    assert from_callback(lookup).name == "lookup"
