"""Tests for trust policies and the approval gate."""

import pytest

from pyagentgate.tools import permissions
from pyagentgate.tools.base import ActionCategory
from pyagentgate.tools.permissions import ApprovalGate, TrustPolicy

from conftest import ScriptedOperator


class TestTrustPolicy:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("interactive", TrustPolicy.INTERACTIVE),
            ("suggest", TrustPolicy.INTERACTIVE),
            ("auto-edit", TrustPolicy.AUTO_EDIT),
            ("AUTO_EDIT", TrustPolicy.AUTO_EDIT),
            (" full-auto ", TrustPolicy.FULL_AUTO),
            (TrustPolicy.FULL_AUTO, TrustPolicy.FULL_AUTO),
        ],
    )
    def test_parse(self, raw, expected):
        assert TrustPolicy.parse(raw) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown trust policy"):
            TrustPolicy.parse("yolo")


class TestApprovalGate:

    def test_full_auto_never_prompts(self, quiet_console):
        operator = ScriptedOperator(answer=False)
        gate = ApprovalGate(TrustPolicy.FULL_AUTO, output=quiet_console, confirm=operator)
        for category in ActionCategory:
            assert gate.request_approval("Do thing", "", category) is True
        assert operator.prompts == []
        assert "Auto-approved: Do thing" in quiet_console.file.getvalue()

    def test_interactive_always_prompts(self, quiet_console):
        operator = ScriptedOperator(answer=True)
        gate = ApprovalGate(TrustPolicy.INTERACTIVE, output=quiet_console, confirm=operator)
        for category in ActionCategory:
            assert gate.request_approval("Do thing", "details", category) is True
        assert len(operator.prompts) == len(ActionCategory)
        assert operator.prompts[0] == ("Do thing", "details")

    def test_interactive_denial(self, quiet_console):
        gate = ApprovalGate("interactive", output=quiet_console, confirm=ScriptedOperator(answer=False))
        assert gate.request_approval("Delete file/directory", "x", ActionCategory.FILESYSTEM) is False

    def test_auto_edit_grants_only_edit_category(self, quiet_console):
        operator = ScriptedOperator(answer=False)
        gate = ApprovalGate(TrustPolicy.AUTO_EDIT, output=quiet_console, confirm=operator)
        assert gate.request_approval("Edit file", "", ActionCategory.EDIT) is True
        assert operator.prompts == []
        for category in (ActionCategory.FILESYSTEM, ActionCategory.EXECUTE, ActionCategory.READ, ActionCategory.NETWORK):
            assert gate.request_approval("Other", "", category) is False
        assert len(operator.prompts) == 4

    def test_category_accepts_plain_string(self, quiet_console):
        gate = ApprovalGate(TrustPolicy.AUTO_EDIT, output=quiet_console, confirm=ScriptedOperator(False))
        assert gate.request_approval("Write file", "", "edit") is True

    def test_with_policy_returns_new_gate(self, quiet_console):
        gate = ApprovalGate(TrustPolicy.INTERACTIVE, output=quiet_console)
        other = gate.with_policy("full-auto")
        assert other is not gate
        assert gate.policy is TrustPolicy.INTERACTIVE
        assert other.policy is TrustPolicy.FULL_AUTO

    def test_decision_not_remembered(self, quiet_console):
        operator = ScriptedOperator(answer=True)
        gate = ApprovalGate(TrustPolicy.INTERACTIVE, output=quiet_console, confirm=operator)
        gate.request_approval("Run shell command", "ls", ActionCategory.EXECUTE)
        operator.answer = False
        assert gate.request_approval("Run shell command", "ls", ActionCategory.EXECUTE) is False
        assert len(operator.prompts) == 2

    def test_terminal_prompt_defaults_to_yes(self, quiet_console, monkeypatch):
        seen = {}

        def fake_ask(prompt, default=None, console=None):
            seen["prompt"] = prompt
            seen["default"] = default
            return False

        monkeypatch.setattr(permissions.Confirm, "ask", fake_ask)
        gate = ApprovalGate(TrustPolicy.INTERACTIVE, output=quiet_console)
        assert gate.request_approval("Run shell command", "Command: [rm] -rf", ActionCategory.EXECUTE) is False
        assert seen["default"] is True
        assert "Run shell command" in seen["prompt"]
        out = quiet_console.file.getvalue()
        assert "Tool requires approval" in out
        assert "Command: [rm] -rf" in out
