import pytest

from commands.command_registry import CommandRegistry
from commands.dispatcher import CommandDispatcher, DispatcherOptions, make_parser


class RecordingHooks:
    def __init__(self):
        self.calls = []

    def on_error(self, message, error):
        self.calls.append(("error", message.content, str(error)))
        return "error"

    def on_remove_message(self, message):
        self.calls.append(("remove", message.content))

    def on_unrecognized(self, message):
        self.calls.append(("unrecognized", message.content))
        return "unrecognized"

    def options(self, **kwargs):
        return DispatcherOptions(
            on_error=self.on_error,
            on_remove_message=self.on_remove_message,
            on_unrecognized=self.on_unrecognized,
            **kwargs,
        )


def test_make_parser_returns_callable_dispatcher():
    handler = make_parser({})
    assert isinstance(handler, CommandDispatcher)
    assert callable(handler)


def test_make_parser_merges_overrides():
    handler = make_parser({}, command_prefix="#", remove_command_messages=False)
    assert handler.options.command_prefix == "#"
    assert handler.options.remove_command_messages is False


def test_options_defaults():
    options = DispatcherOptions()
    assert options.command_prefix == "!"
    assert options.remove_command_messages is True
    assert options.replace(command_prefix="$").command_prefix == "$"
    assert options.command_prefix == "!"


@pytest.mark.asyncio
async def test_ignores_messages_that_are_not_commands(make_message):
    hooks = RecordingHooks()
    handler = CommandDispatcher({}, hooks.options())

    result = await handler(make_message("Hello, world!"))

    assert result is None
    assert hooks.calls == []


@pytest.mark.asyncio
async def test_reports_unrecognized_commands(make_message):
    handler = make_parser({})
    message = make_message("!cmd")

    result = await handler(message)

    assert result == "<@id>, I don't recognize the command `!cmd`."
    assert message.delete_calls == 0


@pytest.mark.asyncio
async def test_removes_messages_if_required(make_message):
    handler = make_parser({"cmd": lambda message: None}, remove_command_messages=True)
    message = make_message("!cmd")

    await handler(message)

    assert message.delete_calls == 1


@pytest.mark.asyncio
async def test_does_not_remove_messages_if_not_required(make_message):
    handler = make_parser({"cmd": lambda message: None}, remove_command_messages=False)
    message = make_message("!cmd")

    await handler(message)

    assert message.delete_calls == 0


@pytest.mark.asyncio
async def test_reports_errors_during_command_execution(make_message):
    def cmd(message):
        raise Exception("Fake error!")

    handler = make_parser({"cmd": cmd}, remove_command_messages=False)
    message = make_message("!cmd")

    result = await handler(message)

    assert result == "<@id>, `!cmd` resulted in `Fake error!`."
    assert message.delete_calls == 0


@pytest.mark.asyncio
async def test_error_without_message_reports_exception_type(make_message):
    async def cmd(message):
        raise KeyError()

    handler = make_parser({"cmd": cmd}, remove_command_messages=False)

    result = await handler(make_message("!cmd"))

    assert result == "<@id>, `!cmd` resulted in `KeyError`."


@pytest.mark.asyncio
async def test_passes_arguments_positionally(make_message):
    received = []

    async def cmd(message, *args):
        received.append((message.content, args))
        return "done"

    handler = make_parser({"cmd": cmd}, remove_command_messages=False)
    text = '!cmd arg1 "arg2 & arg3"'

    result = await handler(make_message(text))

    assert result == "done"
    assert received == [(text, ("arg1", "arg2 & arg3"))]


@pytest.mark.asyncio
async def test_sync_handler_result_is_returned(make_message):
    handler = make_parser({"add": lambda message, a, b: int(a) + int(b)}, remove_command_messages=False)

    assert await handler(make_message("!add 2 3")) == 5


@pytest.mark.asyncio
async def test_removal_runs_before_handler(make_message):
    hooks = RecordingHooks()

    def cmd(message):
        hooks.calls.append(("cmd", message.content))

    handler = CommandDispatcher({"cmd": cmd}, hooks.options())

    await handler(make_message("!cmd"))

    assert hooks.calls == [("remove", "!cmd"), ("cmd", "!cmd")]


@pytest.mark.asyncio
async def test_removal_failure_goes_to_error_hook(make_message):
    hooks = RecordingHooks()
    called = []

    def fail_remove(message):
        raise RuntimeError("cannot delete")

    options = hooks.options().replace(on_remove_message=fail_remove)
    handler = CommandDispatcher({"cmd": lambda message: called.append(True)}, options)

    result = await handler(make_message("!cmd"))

    assert result == "error"
    assert called == []
    assert hooks.calls == [("error", "!cmd", "cannot delete")]


@pytest.mark.asyncio
async def test_default_removal_error_is_reported(make_message):
    message = make_message("!cmd")

    def delete():
        raise PermissionError("Missing permissions")

    message.delete = delete
    handler = make_parser({"cmd": lambda message: None})

    result = await handler(message)

    assert result == "<@id>, `!cmd` resulted in `Missing permissions`."


@pytest.mark.asyncio
async def test_async_hooks_are_awaited(make_message):
    async def on_unrecognized(message):
        return f"no {message.content}"

    handler = make_parser({}, on_unrecognized=on_unrecognized)

    assert await handler(make_message("!nope")) == "no !nope"


@pytest.mark.asyncio
async def test_custom_prefix(make_message):
    hooks = RecordingHooks()
    handler = CommandDispatcher({"cmd": lambda message: "ran"}, hooks.options(command_prefix="$$"))

    assert await handler(make_message("!cmd")) is None
    assert await handler(make_message("$$cmd")) == "ran"


@pytest.mark.asyncio
async def test_command_lookup_is_exact(make_message):
    hooks = RecordingHooks()
    handler = CommandDispatcher({"cmd": lambda message: "ran"}, hooks.options())

    assert await handler(make_message("!CMD")) == "unrecognized"


@pytest.mark.asyncio
async def test_dispatches_through_registry_aliases(make_message):
    registry = CommandRegistry()
    registry.register({"name": "ping", "aliases": ["p"]}, lambda message: "pong")
    handler = make_parser(registry, remove_command_messages=False)

    assert await handler(make_message("!ping")) == "pong"
    assert await handler(make_message("!p")) == "pong"


@pytest.mark.asyncio
async def test_records_stats(make_message):
    def fail(message):
        raise ValueError("boom")

    hooks = RecordingHooks()
    handler = CommandDispatcher({"ok": lambda message: None, "fail": fail}, hooks.options())

    for text in ["hello", "!ok", "!fail", "!missing"]:
        await handler(make_message(text))

    assert handler.stats.snapshot() == {
        "messagesProcessed": 4,
        "commandsExecuted": 2,
        "unrecognized": 1,
        "errors": 1,
    }
