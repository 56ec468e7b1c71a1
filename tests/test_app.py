"""Tests for command handling."""

from eve_cli.app import Eve, ReplyKind
from eve_cli.config import ConfigModel
from eve_cli.storage import TaskStore
from eve_cli.task import Deadline, Event, RawWhen, Todo
from eve_cli.task_list import TaskList
from eve_cli.ui import render_reply


def _seed(eve, count=3):
    for i in range(1, count + 1):
        eve.handle(f"todo task {i}")


class TestAdding:

    def test_todo_is_added_and_saved(self, eve, store):
        reply = eve.handle("todo read book")

        assert reply.kind == ReplyKind.ADDED
        assert reply.task == Todo("read book")
        assert reply.count == 1
        assert store.load() == [Todo("read book")]

    def test_deadline(self, eve):
        reply = eve.handle("deadline return book /by 2019-12-02 1800")

        assert isinstance(reply.task, Deadline)
        assert str(reply.task) == "[D][ ] return book (by: 2019/12/2 18:00)"

    def test_event_with_raw_times(self, eve):
        reply = eve.handle("event orientation /from next Mon 2pm /to 4pm")

        assert isinstance(reply.task, Event)
        assert reply.task.start == RawWhen("next Mon 2pm")
        assert reply.task.end == RawWhen("4pm")

    def test_event_range_error_changes_nothing(self, eve, store):
        reply = eve.handle("event m /from 12 2 2019 12:00 /to 12 2 2018 12:00")

        assert reply.kind == ReplyKind.ERROR
        assert reply.message == "Sorry, that time range looks invalid: start is after end."
        assert len(eve.tasks) == 0
        assert not store.path.exists()

    def test_usage_error(self, eve):
        reply = eve.handle("todo")
        assert reply.kind == ReplyKind.ERROR
        assert reply.message == "Oops, I need more info. Usage: todo <description>"

    def test_keyword_is_case_insensitive(self, eve):
        assert eve.handle("  TODO read  ").kind == ReplyKind.ADDED


class TestIndexCommands:

    def test_mark_and_unmark(self, eve, store):
        _seed(eve)

        reply = eve.handle("mark 2")
        assert reply.kind == ReplyKind.MARKED
        assert reply.task.done
        assert store.load()[1].done

        reply = eve.handle("unmark 2")
        assert reply.kind == ReplyKind.UNMARKED
        assert not reply.task.done
        assert not store.load()[1].done

    def test_delete(self, eve, store):
        _seed(eve)

        reply = eve.handle("delete 1")
        assert reply.kind == ReplyKind.DELETED
        assert reply.task.description == "task 1"
        assert reply.count == 2
        assert [t.description for t in store.load()] == ["task 2", "task 3"]

    def test_out_of_range(self, eve):
        _seed(eve)

        for line in ("mark 4", "mark 0", "unmark 9", "delete 4"):
            reply = eve.handle(line)
            assert reply.kind == ReplyKind.ERROR
            assert reply.message == "Please provide a valid task number (1-3)."
        assert not any(task.done for task in eve.tasks)
        assert len(eve.tasks) == 3

    def test_non_numeric(self, eve):
        _seed(eve)

        assert eve.handle("mark abc").message == 'Use a number only, e.g., "mark 2".'
        assert eve.handle("unmark abc").message == 'Use a number only, e.g., "unmark 2".'
        assert eve.handle("delete abc").message == 'Use a number only, e.g., "delete 3".'

    def test_empty_list_is_reported_first(self, eve):
        for line in ("mark 2", "mark abc", "delete", "unmark 1"):
            reply = eve.handle(line)
            assert reply.kind == ReplyKind.ERROR
            assert reply.message.startswith("No tasks yet.")


class TestOtherCommands:

    def test_list(self, eve):
        _seed(eve, 2)
        reply = eve.handle("list")
        assert reply.kind == ReplyKind.LIST
        assert render_reply(reply) == (
            "Here are the tasks in your list:\n"
            "1.[T][ ] task 1\n"
            "2.[T][ ] task 2"
        )

    def test_find(self, eve):
        eve.handle("todo read book")
        eve.handle("todo buy pen")
        reply = eve.handle("find BOOK")
        assert reply.kind == ReplyKind.FOUND
        assert [t.description for t in reply.tasks] == ["read book"]

    def test_help_and_bye(self, eve):
        assert eve.handle("help").kind == ReplyKind.HELP

        reply = eve.handle("bye")
        assert reply.kind == ReplyKind.GOODBYE
        assert reply.exit

    def test_blank_line(self, eve):
        assert eve.handle("   ").kind == ReplyKind.EMPTY
        assert eve.handle(None).kind == ReplyKind.EMPTY

    def test_unknown_command(self, eve):
        reply = eve.handle("dance now")
        assert reply.kind == ReplyKind.UNKNOWN
        assert reply.is_error
        assert reply.message == (
            "Sorry, I don't understand that. Type 'help' to see available commands."
        )

    def test_unknown_command_with_suggestion(self, eve):
        reply = eve.handle("dealine x /by y")
        assert reply.message.endswith("Did you mean 'deadline'?")


class TestLifecycle:

    def test_tasks_survive_restart(self, data_file):
        first = Eve(TaskStore(data_file))
        first.handle("todo read book")
        first.handle("deadline return book /by 2/12/2019 1800")
        first.handle("mark 1")

        second = Eve(TaskStore(data_file))
        assert [str(t) for t in second.tasks] == [
            "[T][X] read book",
            "[D][ ] return book (by: 2019/12/2 18:00)",
        ]

    def test_from_config(self, data_file):
        eve = Eve.from_config(ConfigModel(data_file=str(data_file)))
        assert eve.store.path == data_file
        assert len(eve.tasks) == 0

    def test_failed_save_keeps_memory_state(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        eve = Eve(TaskStore(blocker / "eve.txt"), TaskList())

        reply = eve.handle("todo read book")
        assert reply.kind == ReplyKind.ADDED
        assert len(eve.tasks) == 1
        assert "Failed to save tasks" in caplog.text

    def test_multi_line_input_is_rejected(self, eve, store):
        reply = eve.handle("todo line one\nline two")

        assert reply.kind == ReplyKind.ERROR
        assert reply.message == "Oops, I need more info. Usage: todo <description>"
        assert len(eve.tasks) == 0

        eve.handle("deadline a /by 2019-12-02\nT | 1 | injected")
        assert Eve(store).tasks.as_list() == []
