# kerosene_converter/ui/app.py
import logging
import tkinter as tk

import customtkinter as ctk
from PIL import ImageTk

from kerosene_converter.config import (APP_NAME, COLOR_ACCENT, COLOR_ACCENT_HOVER, COLOR_BG,
                                       COLOR_ERROR, COLOR_TEXT, CURRENT_VERSION, setup_logging)
from kerosene_converter.core.units import Unit
from kerosene_converter.ui.icon import build_icon_image
from kerosene_converter.ui.state import FormState

logger = logging.getLogger(__name__)


class ToolTip:
    """
    Cria um tooltip (texto flutuante) para qualquer widget ctk/tk.
    """
    def __init__(self, widget, text):
        self.widget = widget
        self.text = text
        self.tip_window = None
        self.id = None

        self.widget.bind("<Enter>", self.schedule_show)
        self.widget.bind("<Leave>", self.hide_tip)
        self.widget.bind("<ButtonPress>", self.hide_tip)

    def schedule_show(self, event=None):
        self.unschedule()
        # 500ms para não piscar com o mouse passando rápido
        self.id = self.widget.after(500, self.show_tip)

    def unschedule(self):
        id = self.id
        self.id = None
        if id:
            self.widget.after_cancel(id)

    def show_tip(self, event=None):
        x = self.widget.winfo_rootx() + 25
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 5

        self.tip_window = tw = tk.Toplevel(self.widget)
        tw.wm_overrideredirect(True)
        tw.wm_geometry(f"+{x}+{y}")

        label = tk.Label(tw, text=self.text, justify='left',
                         background="#1A1A1A", fg="#E0E0E0",
                         relief='solid', borderwidth=1,
                         font=("Arial", 9, "normal"))
        label.pack(ipadx=5, ipady=2)

    def hide_tip(self, event=None):
        self.unschedule()
        tw = self.tip_window
        self.tip_window = None
        if tw:
            tw.destroy()


class App(ctk.CTk):
    def __init__(self):
        super().__init__()

        self.state_model = FormState()
        # Evita recursão quando o reset reescreve os widgets
        self._syncing = False
        self._showing_error = False

        self.app_icon_image = ImageTk.PhotoImage(build_icon_image())
        self.wm_iconphoto(True, self.app_icon_image)

        self.title(f"{APP_NAME} {CURRENT_VERSION}")
        self.geometry("420x640")
        self.configure(fg_color=COLOR_BG)
        self.protocol("WM_DELETE_WINDOW", self.on_closing)

        self._create_form()
        self._render()

        # Atalhos de teclado
        self.bind('<Return>', lambda event: self.refresh())
        self.bind('<Escape>', lambda event: self.clear())

    def _create_form(self):
        unit_labels = [unit.value for unit in Unit]
        field_config = {
            "fg_color": COLOR_BG,
            "border_color": COLOR_ACCENT,
            "border_width": 2,
            "text_color": COLOR_TEXT,
        }
        menu_config = {
            "fg_color": COLOR_BG,
            "button_color": COLOR_ACCENT,
            "button_hover_color": COLOR_ACCENT_HOVER,
            "text_color": COLOR_TEXT,
        }

        self.form = ctk.CTkFrame(self, fg_color="transparent")
        self.form.pack(fill="both", expand=True, padx=30, pady=20)

        self.lbl_title = ctk.CTkLabel(self.form, text=APP_NAME, text_color=COLOR_ACCENT,
                                      font=ctk.CTkFont(size=20, weight="bold"), wraplength=340)
        self.lbl_title.pack(pady=(10, 25))

        self._add_caption("Input Unit")
        self.from_menu = ctk.CTkOptionMenu(self.form, values=unit_labels,
                                           command=self.change_from_unit, **menu_config)
        self.from_menu.set(self.state_model.from_unit.value)
        self.from_menu.pack(fill="x", pady=(0, 12))
        ToolTip(self.from_menu, "Unit of the value you type")

        self._add_caption("Value")
        self.value_var = ctk.StringVar(value=self.state_model.raw_value)
        self.value_var.trace_add("write", self._on_value_changed)
        self.entry_value = ctk.CTkEntry(self.form, textvariable=self.value_var,
                                        placeholder_text="0.00", justify="center", **field_config)
        self.entry_value.pack(fill="x", pady=(0, 12))

        self._add_caption("Output Unit")
        self.to_menu = ctk.CTkOptionMenu(self.form, values=unit_labels,
                                         command=self.change_to_unit, **menu_config)
        self.to_menu.set(self.state_model.to_unit.value)
        self.to_menu.pack(fill="x", pady=(0, 12))
        ToolTip(self.to_menu, "Unit of the result")

        # --- RESULTADO ---
        self._add_caption("Result")
        self.result_frame = ctk.CTkFrame(self.form, height=110, fg_color=COLOR_BG,
                                         border_color=COLOR_ACCENT, border_width=2)
        self.result_frame.pack(fill="x", pady=(0, 20))
        self.result_frame.pack_propagate(False)

        inner = ctk.CTkFrame(self.result_frame, fg_color="transparent")
        inner.place(relx=0.5, rely=0.5, anchor="center")
        self.lbl_magnitude = ctk.CTkLabel(inner, text="", text_color=COLOR_TEXT,
                                          font=ctk.CTkFont(size=40, weight="bold"))
        self.lbl_magnitude.pack(side="left")
        self.lbl_unit = ctk.CTkLabel(inner, text="", text_color=COLOR_ACCENT,
                                     font=ctk.CTkFont(size=24))
        self.lbl_unit.pack(side="left", padx=(8, 0))
        self.lbl_error = ctk.CTkLabel(inner, text="", text_color=COLOR_ERROR,
                                      font=ctk.CTkFont(size=14))

        self.btn_clear = ctk.CTkButton(self.form, text="CLEAR", command=self.clear,
                                       height=40, fg_color=COLOR_BG, border_width=2,
                                       border_color=COLOR_ACCENT, hover_color=COLOR_ACCENT,
                                       text_color=COLOR_TEXT,
                                       font=ctk.CTkFont(size=14, weight="bold"))
        self.btn_clear.pack(fill="x")
        ToolTip(self.btn_clear, "Reset units and value (Esc)")

    def _add_caption(self, text: str):
        lbl = ctk.CTkLabel(self.form, text=text.upper(), text_color=COLOR_ACCENT,
                           font=ctk.CTkFont(size=12))
        lbl.pack(pady=(0, 4))

    def _on_value_changed(self, *args):
        if self._syncing:
            return
        self.state_model.set_value(self.value_var.get())
        self._render()

    def change_from_unit(self, choice: str):
        self.state_model.set_from_unit(Unit.from_label(choice))
        self._render()

    def change_to_unit(self, choice: str):
        self.state_model.set_to_unit(Unit.from_label(choice))
        self._render()

    def refresh(self):
        self.state_model.evaluate()
        self._render()

    def clear(self):
        self.state_model.reset()

        self._syncing = True
        try:
            self.from_menu.set(self.state_model.from_unit.value)
            self.to_menu.set(self.state_model.to_unit.value)
            self.value_var.set(self.state_model.raw_value)
        finally:
            self._syncing = False

        self._render()
        self.entry_value.focus_set()

    def _render(self):
        """Atualiza a área de resultado a partir do estado."""
        if self.state_model.error:
            self.lbl_magnitude.pack_forget()
            self.lbl_unit.pack_forget()
            self.lbl_error.configure(text=self.state_model.error)
            self.lbl_error.pack(side="left")
            self._showing_error = True
            return

        self.lbl_error.pack_forget()
        magnitude, unit = self.state_model.display_parts()
        self.lbl_magnitude.configure(text=magnitude)
        self.lbl_unit.configure(text=unit)
        if self._showing_error:
            self.lbl_magnitude.pack(side="left")
            self.lbl_unit.pack(side="left", padx=(8, 0))
            self._showing_error = False

    def on_closing(self):
        self.quit()
        self.destroy()


def main():
    setup_logging()
    ctk.set_appearance_mode("dark")
    logger.info("Starting %s %s", APP_NAME, CURRENT_VERSION)
    app = App()
    app.mainloop()
