"""Tests for ElementManager in clack/elements/manager.py.

Covers:
- End-to-end prompt runs against fake terminal collaborators
- Line accounting between renders
- Terminal restoration on every exit path
"""

from __future__ import annotations

import pytest
from conftest import FakeReader, RecordingRegion, keys

from clack import PromptCancelled, confirm, input, multiselect, password, select
from clack.elements import ElementManager, InputEvent, Select


def run(prompt, events, region: RecordingRegion):  # type: ignore[no-untyped-def]
    reader = FakeReader(events)
    manager = ElementManager(region=region, reader=reader)  # type: ignore[arg-type]
    try:
        return prompt.interact(manager)
    finally:
        assert reader.started == reader.stopped == 1


class TestScenarios:
    """End-to-end scenarios."""

    def test_text_hello(self, region: RecordingRegion) -> None:
        assert run(input("Name?"), keys("hello", "Enter"), region) == "hello"

    def test_password(self, region: RecordingRegion) -> None:
        result = run(password("Password?"), keys("ab", "Enter"), region)
        assert result == "ab"
        assert "▪▪" in region.renders[2]
        assert all("ab" not in render for render in region.renders)

    def test_confirm_y(self, region: RecordingRegion) -> None:
        assert run(confirm("Continue?").initial_value(False), keys("y"), region) is True

    def test_select(self, region: RecordingRegion) -> None:
        prompt = select("Pick").item("ts", "TypeScript").item("js", "JavaScript")
        assert run(prompt, keys("Down", "Enter"), region) == "js"

    def test_multiselect(self, region: RecordingRegion) -> None:
        prompt = multiselect("Pick").item("a", "A").item("b", "B").item("c", "C")
        assert run(prompt, keys(" ", "Down", " ", "Enter"), region) == ["a", "b"]

    def test_text_escape(self, region: RecordingRegion) -> None:
        prompt = input("Name?")
        with pytest.raises(PromptCancelled):
            run(prompt, keys("Escape"), region)
        assert prompt.input.is_empty()
        assert "Operation cancelled." in region.renders[-1]


class TestDriverLoop:
    """Tests for the render loop."""

    def test_renders_initial_and_after_each_event(self, region: RecordingRegion) -> None:
        run(input("Name?"), keys("ab", "Enter"), region)
        assert len(region.renders) == 4
        assert "◇  Name?" in region.renders[-1]

    def test_stops_reading_after_submit(self, region: RecordingRegion) -> None:
        reader = FakeReader(keys("y", "n", "Enter"))
        manager = ElementManager(region=region, reader=reader)  # type: ignore[arg-type]
        assert confirm("Continue?").interact(manager) is True
        assert len(reader.events) == 2

    def test_validation_error_rendered_then_recovered(
        self, region: RecordingRegion
    ) -> None:
        prompt = input("Name?").validate(lambda v: None if v else "Value is required!")
        assert run(prompt, keys("Enter", "x", "Enter"), region) == "x"
        assert "Value is required!" in region.renders[1]
        assert "Value is required!" not in region.renders[2]

    def test_erases_previous_render(self, region: RecordingRegion) -> None:
        run(input("Name?"), keys("a", "Enter"), region)
        # Each prompt render is 4 lines; every re-render erases 4 lines.
        assert region.cleared == [0, 4, 4]
        assert region.last_lines == 0
        assert region.releases == 1

    def test_cursor_restored(self, region: RecordingRegion) -> None:
        run(input("Name?"), keys("Enter"), region)
        assert not region.cursor_hidden

    def test_io_error_propagates_and_restores(self, region: RecordingRegion) -> None:
        reader = FakeReader([])
        manager = ElementManager(region=region, reader=reader)  # type: ignore[arg-type]
        with pytest.raises(EOFError):
            input("Name?").interact(manager)
        assert reader.stopped == 1
        assert not region.cursor_hidden
        assert region.paste_modes == [True, False]

    def test_bracketed_paste_enabled_while_running(
        self, region: RecordingRegion
    ) -> None:
        run(input("Name?"), keys("a", "Enter"), region)
        assert region.paste_modes == [True, False]

    def test_bracketed_paste_disabled_on_cancel(self, region: RecordingRegion) -> None:
        with pytest.raises(PromptCancelled):
            run(input("Name?"), keys("Escape"), region)
        assert region.paste_modes == [True, False]

    def test_multiline_paste_does_not_submit(self, region: RecordingRegion) -> None:
        events = [InputEvent(key="Paste", char="ab\r\ncd"), *keys("Enter")]
        assert run(input("Name?"), events, region) == "ab cd"

    def test_parsed_input_retries_until_valid(self, region: RecordingRegion) -> None:
        prompt = input("Age?").parse(int)
        assert run(prompt, keys("x", "Enter", "Backspace", "42", "Enter"), region) == 42
        assert "invalid literal" in region.renders[2]
        assert "◇  Age?" in region.renders[-1]

    def test_empty_select_raises_before_raw_mode(self, region: RecordingRegion) -> None:
        reader = FakeReader(keys("Enter"))
        manager = ElementManager(region=region, reader=reader)  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            Select("Pick").interact(manager)
        assert reader.started == 0
        assert region.renders == []

    def test_nested_run_is_rejected(self, region: RecordingRegion) -> None:
        manager = ElementManager(region=region, reader=FakeReader([]))  # type: ignore[arg-type]

        class Nested(Select[str]):
            def on_activate(self) -> None:
                manager.run(input("inner"))

        with pytest.raises(RuntimeError):
            manager.run(Nested("outer").item("a", "A"))

    def test_sequential_prompts_share_manager(self, region: RecordingRegion) -> None:
        reader = FakeReader(keys("a", "Enter", "n"))
        manager = ElementManager(region=region, reader=reader)  # type: ignore[arg-type]
        assert input("Name?").interact(manager) == "a"
        assert confirm("Sure?").interact(manager) is False
        assert reader.started == 2

    def test_ctrl_c_cancels(self, region: RecordingRegion) -> None:
        with pytest.raises(PromptCancelled):
            run(confirm("Continue?"), [InputEvent(key="c", char="c", ctrl=True)], region)
