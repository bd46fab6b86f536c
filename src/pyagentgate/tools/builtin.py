from __future__ import annotations

from .catalog import ToolCatalog

from .builtin_tools.file_read import ReadFileTool
from .builtin_tools.file_write import WriteFileTool
from .builtin_tools.file_edit import EditFileTool
from .builtin_tools.listdir import ListDirTool
from .builtin_tools.mkdir_tool import CreateDirectoryTool
from .builtin_tools.delete_tool import DeleteFileTool
from .builtin_tools.bash_tool import RunCommandTool
from .builtin_tools.http_tool import HttpRequestTool
from .builtin_tools.envinfo_tool import EnvironmentInfoTool

def register_builtin_tools(catalog: ToolCatalog) -> None:
    catalog.register(ReadFileTool())
    catalog.register(WriteFileTool())
    catalog.register(EditFileTool())
    catalog.register(ListDirTool())
    catalog.register(CreateDirectoryTool())
    catalog.register(DeleteFileTool())
    catalog.register(RunCommandTool())
    catalog.register(HttpRequestTool())
    catalog.register(EnvironmentInfoTool())

def builtin_catalog() -> ToolCatalog:
    catalog = ToolCatalog()
    register_builtin_tools(catalog)
    return catalog
