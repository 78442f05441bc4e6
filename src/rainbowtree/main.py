from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI when arguments are present and to the GUI
otherwise, and installs a last-resort exception hook that logs fatal
errors and reports them on the active interface.
"""

import logging
import os
import sys
import traceback
from typing import Any, List, Optional

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, "frozen", False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and report it, then exit with status 1.

    CLI runs get the trace on stderr; GUI runs get a message box, falling
    back to stderr if Tk itself is unusable.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("rainbowtree.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    if len(sys.argv) > 1:
        print("CRITICAL ERROR (RAINBOWTREE CLI)", file=sys.stderr)
        print(stack_trace, file=sys.stderr)
        sys.exit(1)

    try:
        import tkinter.messagebox as mb
        from tkinter import Tk
        root = Tk()
        root.withdraw()
        mb.showerror("RainbowTree - Fatal Error", f"A critical error occurred:\n\n{error_msg}")
        root.destroy()
    except Exception:
        print(f"CRITICAL SYSTEM ERROR: {error_msg}\n{stack_trace}", file=sys.stderr)
    sys.exit(1)


sys.excepthook = global_exception_handler


def main(argv: Optional[List[str]] = None) -> int:
    """
    Dispatch to the CLI or GUI.

    Returns:
        int: Process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    if args:
        from rainbowtree.interface.cli.app import main as cli_main
        return cli_main(args)

    from rainbowtree.interface.gui.app import main as gui_main
    gui_main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
