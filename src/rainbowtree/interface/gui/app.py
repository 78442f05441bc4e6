from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle.

Initializes logging, restores the saved settings, builds the settings
window and binds its widgets to the AppController.
"""

import logging
import os
from typing import Any

import customtkinter as ctk

from rainbowtree.domain import config as cfg
from rainbowtree.domain import constants as const
from rainbowtree.infra.logging import LoggingConfig, configure_logging, get_default_gui_log_path
from rainbowtree.interface.gui.controller import AppController
from rainbowtree.interface.gui.settings import SettingsFrame

logger = logging.getLogger(__name__)


def main() -> None:
    """Launch the settings window and enter the Tk main loop."""
    configure_logging(LoggingConfig(level="INFO", console=True, log_file=get_default_gui_log_path()))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")

    config = cfg.load_config()

    ctk.set_appearance_mode("System")
    ctk.set_default_color_theme("blue")
    app = ctk.CTk()
    app.title(f"{const.APP_NAME} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("640x720")
    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=1)

    settings_frame = SettingsFrame(app, config)
    settings_frame.grid(row=0, column=0, sticky="nsew", padx=20, pady=20)
    settings_frame.entry_input.insert(0, os.getcwd())

    controller = AppController(app, config)
    controller.register_view(settings_frame)
    controller.sync_view_from_config()

    for level, (entry, btn) in enumerate(zip(settings_frame.entry_colors, settings_frame.btn_pick_colors)):
        _bind_commit(entry, controller.on_settings_changed)
        btn.configure(command=lambda lvl=level: controller.pick_color(lvl))

    _bind_commit(settings_frame.entry_unfocused, controller.on_settings_changed)
    settings_frame.btn_pick_unfocused.configure(command=controller.pick_unfocused_color)
    settings_frame.combo_line_style.configure(command=controller.on_settings_changed)
    settings_frame.sw_focus.configure(command=controller.on_settings_changed)

    _bind_commit(settings_frame.entry_open, controller.on_open_items_changed)
    settings_frame.btn_browse.configure(command=lambda: _browse_folder(app, settings_frame.entry_input))
    settings_frame.btn_preview.configure(command=controller.export_preview)
    settings_frame.btn_reset.configure(command=controller.reset_config)

    def on_closing() -> None:
        controller.shutdown()
        cfg.save_config(controller.config)
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_closing)
    app.mainloop()


# -----------------------------------------------------------------------------
# PRIVATE UI HELPERS
# -----------------------------------------------------------------------------

def _bind_commit(entry: ctk.CTkEntry, callback: Any) -> None:
    """Commit an entry on Return or when it loses focus."""
    entry.bind("<Return>", callback)
    entry.bind("<FocusOut>", callback)


def _browse_folder(app: ctk.CTk, entry_widget: ctk.CTkEntry) -> None:
    path = ctk.filedialog.askdirectory(parent=app, title="Select Directory")
    if path:
        entry_widget.delete(0, "end")
        entry_widget.insert(0, path)


if __name__ == "__main__":
    main()
