import customtkinter as ctk
from tkinter import filedialog, messagebox
import os
from reliability_calc.metrics import FORMULAS
from reliability_calc.report import REPORT_FILENAME, format_time
from reliability_calc.session import CalculatorSession

class ResultsWindow(ctk.CTkToplevel):
    def __init__(self, parent: "Reliability_App"):
        super().__init__(parent)
        self.parent_app = parent
        self.session = parent.session
        result = self.session.result
        self.title("Wyniki obliczeń")
        self.geometry("420x340")
        self.attributes("-topmost", True)
        # Zamknięcie krzyżykiem = przycisk "Zamknij"
        self.protocol("WM_DELETE_WINDOW", self.close)

        self.lbl_title = ctk.CTkLabel(self, text="Wyniki obliczeń", font=ctk.CTkFont(size=20, weight="bold"))
        self.lbl_title.pack(pady=(15, 10))

        rows = [
            ("t", format_time(result.t)),
            ("F*(t)", result.F),
            ("R*(t)", result.R),
            ("f*(t)", result.f),
            ("λ*(t)", result.lambda_),
            ("E*T", f"{result.mean_time} {self.session.unit}"),
        ]
        for symbol, value in rows:
            lbl = ctk.CTkLabel(self, text=f"{symbol}: {value}", font=ctk.CTkFont(size=14))
            lbl.pack(anchor="w", padx=30)

        self.btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.btn_frame.pack(pady=15)

        self.btn_export = ctk.CTkButton(self.btn_frame, text="Pobierz plik tekstowy", fg_color="#1b5e20", hover_color="#2e7d32", command=self.export)
        self.btn_export.grid(row=0, column=0, padx=10)

        self.btn_close = ctk.CTkButton(self.btn_frame, text="Zamknij", command=self.close)
        self.btn_close.grid(row=0, column=1, padx=10)

    def export(self):
        save_path = filedialog.asksaveasfilename(
            parent=self,
            initialfile=REPORT_FILENAME,
            defaultextension=".txt",
            filetypes=[("Plik tekstowy", "*.txt")],
            title="Zapisz raport niezawodności",
        )
        if not save_path:
            return
        try:
            path = self.session.export_report(save_path)
        except OSError as e:
            messagebox.showerror("Błąd zapisu", f"Nie udało się zapisać raportu:\n{e}", parent=self)
            return
        messagebox.showinfo("Raport", f"Zapisano raport do:\n{os.path.basename(path)}", parent=self)

    def close(self):
        self.session.close_results()
        self.parent_app.results_window = None
        self.destroy()

# Konfiguracja wyglądu
ctk.set_appearance_mode("Dark")
ctk.set_default_color_theme("blue")

class Reliability_App(ctk.CTk):
    def __init__(self):
        super().__init__()

        self.title("Obliczanie empirycznych wskaźników niezawodności")
        self.geometry("760x760")
        self.minsize(600, 600)
        self.grid_columnconfigure(0, weight=1)

        self.session = CalculatorSession()
        self.results_window = None

        self.setup_input_section()
        self.setup_times_section()
        self.setup_calculation_section()
        self.setup_formulas_section()

        self.btn_reset = ctk.CTkButton(self, text="Resetuj", fg_color="#b71c1c", hover_color="#8e0000", command=self.reset_all)
        self.btn_reset.grid(row=4, column=0, padx=20, pady=(10, 20), sticky="ew")

        self.refresh()

    def setup_input_section(self):
        # --- Wprowadzanie czasów ---
        self.input_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.input_frame.grid(row=0, column=0, padx=20, pady=(20, 10), sticky="ew")
        self.input_frame.grid_columnconfigure(0, weight=1)

        self.lbl_app = ctk.CTkLabel(self.input_frame, text="Obliczanie empirycznych wskaźników niezawodności", font=ctk.CTkFont(size=20, weight="bold"))
        self.lbl_app.grid(row=0, column=0, pady=(0, 15))

        self.entry_time = ctk.CTkEntry(self.input_frame, placeholder_text="Wprowadź czas do awarii")
        self.entry_time.grid(row=1, column=0, sticky="ew")
        self.entry_time.bind("<Return>", lambda _e: self.add_time())

        self.btn_add = ctk.CTkButton(self.input_frame, text="Dodaj", command=self.add_time)
        self.btn_add.grid(row=2, column=0, pady=(8, 0), sticky="ew")

        self.lbl_error = ctk.CTkLabel(self.input_frame, text="", text_color="#ef5350")
        self.lbl_error.grid(row=3, column=0, sticky="w")

    def setup_times_section(self):
        # --- Lista wprowadzonych czasów ---
        self.times_frame = ctk.CTkFrame(self)
        self.times_frame.grid(row=1, column=0, padx=20, pady=10, sticky="ew")
        self.times_frame.grid_columnconfigure(0, weight=1)

        self.lbl_times = ctk.CTkLabel(self.times_frame, text="Wprowadzone czasy do awarii:", font=ctk.CTkFont(size=16, weight="bold"))
        self.lbl_times.grid(row=0, column=0, padx=10, pady=(10, 5), sticky="w")

        self.chips_frame = ctk.CTkScrollableFrame(self.times_frame, height=120, orientation="vertical")
        self.chips_frame.grid(row=1, column=0, padx=10, sticky="ew")

        self.lbl_count = ctk.CTkLabel(self.times_frame, text="")
        self.lbl_count.grid(row=2, column=0, padx=10, pady=(5, 10), sticky="w")

    def setup_calculation_section(self):
        # --- Obliczenia dla t ---
        self.calc_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.calc_frame.grid(row=2, column=0, padx=20, pady=10, sticky="ew")
        self.calc_frame.grid_columnconfigure(0, weight=1)

        self.lbl_calc = ctk.CTkLabel(self.calc_frame, text="Oblicz wskaźniki dla danego t", font=ctk.CTkFont(size=16, weight="bold"))
        self.lbl_calc.grid(row=0, column=0, columnspan=2, sticky="w")

        self.entry_t = ctk.CTkEntry(self.calc_frame, placeholder_text="Wartość t")
        self.entry_t.grid(row=1, column=0, padx=(0, 8), sticky="ew")
        self.entry_t.bind("<Return>", lambda _e: self.calculate())

        self.btn_calc = ctk.CTkButton(self.calc_frame, text="Oblicz wskaźniki", fg_color="#1b5e20", hover_color="#2e7d32", command=self.calculate)
        self.btn_calc.grid(row=1, column=1)

    def setup_formulas_section(self):
        self.formulas_frame = ctk.CTkFrame(self)
        self.formulas_frame.grid(row=3, column=0, padx=20, pady=10, sticky="ew")

        lbl = ctk.CTkLabel(self.formulas_frame, text="Wzory obliczeń:", font=ctk.CTkFont(size=16, weight="bold"))
        lbl.pack(anchor="w", padx=10, pady=(10, 5))
        for symbol, description, formula in FORMULAS:
            lbl = ctk.CTkLabel(self.formulas_frame, text=f"• {symbol}: {description} {formula}", justify="left", wraplength=680)
            lbl.pack(anchor="w", padx=10)
        ctk.CTkLabel(self.formulas_frame, text="").pack()

    # --- Metody obsługi zdarzeń ---
    def add_time(self):
        if self.session.add_time(self.entry_time.get()):
            self.entry_time.delete(0, "end")
        self.refresh()

    def remove_time(self, index):
        self.session.remove_time(index)
        self.refresh()

    def calculate(self):
        ok = self.session.calculate(self.entry_t.get())
        self.refresh()
        if ok:
            self.open_results()

    def open_results(self):
        # Nowy wynik zastępuje poprzednie okno
        if self.results_window is not None:
            self.results_window.destroy()
        self.results_window = ResultsWindow(self)

    def reset_all(self):
        if self.results_window is not None:
            self.results_window.destroy()
            self.results_window = None
        self.session.reset()
        self.entry_time.delete(0, "end")
        self.entry_t.delete(0, "end")
        self.refresh()

    def refresh(self):
        """Odświeża listę czasów, licznik i komunikat błędu na podstawie sesji."""
        for widget in self.chips_frame.winfo_children():
            widget.destroy()

        columns = 5
        for index, time in enumerate(self.session.times):
            chip = ctk.CTkFrame(self.chips_frame, fg_color="#424242", corner_radius=6)
            chip.grid(row=index // columns, column=index % columns, padx=4, pady=4, sticky="w")

            btn_remove = ctk.CTkButton(chip, text="X", width=20, height=20, corner_radius=10, fg_color="#c62828", hover_color="#8e0000",
                                       command=lambda i=index: self.remove_time(i))
            btn_remove.pack(side="left", padx=(4, 2), pady=4)

            lbl = ctk.CTkLabel(chip, text=f"{format_time(time)} {self.session.unit}")
            lbl.pack(side="left", padx=(2, 8))

        self.lbl_count.configure(text=f"Liczba wprowadzonych czasów do awarii: {self.session.count}")
        self.lbl_error.configure(text=self.session.error_message)

if __name__ == "__main__":
    app = Reliability_App()
    app.mainloop()
