from __future__ import annotations

"""
Settings Panel UI Component.

One color field per nesting level, the connector line style, the
unfocused title color and the focus-mode toggle, followed by the preview
source (directory and open items).
"""

from typing import Any, Dict, List

import customtkinter as ctk

from rainbowtree.domain import constants as const


class SettingsFrame(ctk.CTkFrame):
    """
    Styling settings and preview source view.
    """

    def __init__(self, master: Any, config: Dict[str, Any], **kwargs: Any):
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.scroll = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self.scroll.grid(row=0, column=0, sticky="nsew")
        self.scroll.grid_columnconfigure(0, weight=1)

        # -----------------------------------------------------------------------------
        # SECTION 1: LEVEL COLORS
        # -----------------------------------------------------------------------------
        self.frame_colors = ctk.CTkFrame(self.scroll)
        self.frame_colors.grid(row=0, column=0, sticky="ew", pady=(0, 10))
        self.frame_colors.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            self.frame_colors,
            text="Folder line colors",
            font=ctk.CTkFont(weight="bold")
        ).grid(row=0, column=0, columnspan=3, padx=10, pady=5, sticky="w")

        colors = config.get("colors", [])
        self.entry_colors: List[ctk.CTkEntry] = []
        self.btn_pick_colors: List[ctk.CTkButton] = []
        for i, name in enumerate(const.LEVEL_NAMES):
            ctk.CTkLabel(self.frame_colors, text=f"{name} color").grid(
                row=i + 1, column=0, padx=10, pady=5, sticky="w"
            )
            entry = ctk.CTkEntry(self.frame_colors, width=120)
            if i < len(colors):
                entry.insert(0, colors[i])
            entry.grid(row=i + 1, column=1, padx=10, pady=5, sticky="ew")
            btn = ctk.CTkButton(self.frame_colors, text="Pick", width=60)
            btn.grid(row=i + 1, column=2, padx=10, pady=5)
            self.entry_colors.append(entry)
            self.btn_pick_colors.append(btn)

        # -----------------------------------------------------------------------------
        # SECTION 2: LINES AND FOCUS
        # -----------------------------------------------------------------------------
        self.frame_focus = ctk.CTkFrame(self.scroll)
        self.frame_focus.grid(row=1, column=0, sticky="ew", pady=(0, 10))
        self.frame_focus.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(self.frame_focus, text="Line style").grid(row=0, column=0, padx=10, pady=10, sticky="w")
        self.combo_line_style = ctk.CTkComboBox(
            self.frame_focus,
            values=list(const.LINE_STYLES),
            state="readonly"
        )
        self.combo_line_style.set(config.get("line_style", const.DEFAULT_LINE_STYLE))
        self.combo_line_style.grid(row=0, column=1, padx=10, pady=10, sticky="w")

        ctk.CTkLabel(self.frame_focus, text="Unfocused title color").grid(
            row=1, column=0, padx=10, pady=10, sticky="w"
        )
        self.entry_unfocused = ctk.CTkEntry(self.frame_focus, width=120)
        self.entry_unfocused.insert(0, config.get("unfocused_color", const.DEFAULT_UNFOCUSED_COLOR))
        self.entry_unfocused.grid(row=1, column=1, padx=10, pady=10, sticky="ew")
        self.btn_pick_unfocused = ctk.CTkButton(self.frame_focus, text="Pick", width=60)
        self.btn_pick_unfocused.grid(row=1, column=2, padx=10, pady=10)

        self.sw_focus = ctk.CTkSwitch(self.frame_focus, text="Enable focus mode")
        if config.get("enable_focus"):
            self.sw_focus.select()
        self.sw_focus.grid(row=2, column=0, columnspan=3, padx=10, pady=10, sticky="w")

        # -----------------------------------------------------------------------------
        # SECTION 3: PREVIEW SOURCE
        # -----------------------------------------------------------------------------
        self.frame_preview = ctk.CTkFrame(self.scroll)
        self.frame_preview.grid(row=2, column=0, sticky="ew", pady=(0, 10))
        self.frame_preview.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(self.frame_preview, text="Directory").grid(row=0, column=0, padx=10, pady=10, sticky="w")
        self.entry_input = ctk.CTkEntry(self.frame_preview)
        self.entry_input.grid(row=0, column=1, padx=10, pady=10, sticky="ew")
        self.btn_browse = ctk.CTkButton(self.frame_preview, text="Browse", width=60)
        self.btn_browse.grid(row=0, column=2, padx=10, pady=10)

        ctk.CTkLabel(self.frame_preview, text="Open items").grid(row=1, column=0, padx=10, pady=10, sticky="w")
        self.entry_open = ctk.CTkEntry(self.frame_preview, placeholder_text="src/app.py, docs/index.md")
        self.entry_open.grid(row=1, column=1, columnspan=2, padx=10, pady=10, sticky="ew")

        self.btn_preview = ctk.CTkButton(self.frame_preview, text="Export Preview")
        self.btn_preview.grid(row=2, column=0, columnspan=3, padx=10, pady=10)

        self.btn_reset = ctk.CTkButton(
            self.scroll,
            text="Reset to defaults",
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "#DCE4EE")
        )
        self.btn_reset.grid(row=3, column=0, pady=20, padx=10)
