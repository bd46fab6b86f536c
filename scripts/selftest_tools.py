from __future__ import annotations
import tempfile
from pathlib import Path

from pyagentgate.tools.base import ToolContext
from pyagentgate.tools.builtin import builtin_catalog
from pyagentgate.tools.gateway import ExecutionGateway
from pyagentgate.tools.permissions import ApprovalGate, TrustPolicy

def main():
    with tempfile.TemporaryDirectory() as td:
        cwd = Path(td)
        gw = ExecutionGateway(builtin_catalog(), ApprovalGate(TrustPolicy.FULL_AUTO), ToolContext(cwd=str(cwd)))

        print("WRITE:", gw.execute("write_file", {"path": "a.txt", "content": "hello\nworld\n"}).to_dict())
        print("READ:", gw.execute("read_file", {"path": "a.txt"}).to_dict())
        print("EDIT:", gw.execute("edit_file", {"path": "a.txt", "search": "world", "replace": "WORLD"}).to_dict())
        print("EDIT(regex):", gw.execute("edit_file", {"path": "a.txt", "search": r"^(\w+)$", "replace": r"<\1>", "regex": True}).to_dict())
        print("READ2:", gw.execute("read_file", {"path": "a.txt"}).to_dict())
        print("MKDIR:", gw.execute("create_directory", {"path": "sub/inner"}).to_dict())
        print("LIST:", gw.execute("list_directory", {"path": ".", "recursive": True}).to_dict())
        print("RUN:", gw.execute("run_command", {"command": "echo 1+1"}).to_dict())
        print("ENV:", gw.execute("get_environment_info", {}).to_dict())
        print("DELETE:", gw.execute("delete_file", {"path": "sub"}).to_dict())
        print("UNKNOWN:", gw.execute("format_disk", {}).to_dict())

if __name__ == "__main__":
    main()
