from __future__ import annotations

import threading
import tkinter as tk
from tkinter import filedialog, messagebox

from src.config.api import load_config
from src.normalizer.api import InvalidConfiguration, check_tab_width
from src.tabifier.api import tabify_file


class MinimalBatchGUI(tk.Tk):
    """
    Minimalistische GUI:
    - User wählt mehrere Quelldateien aus
    - GUI ruft tabify_file(...) pro Datei sequenziell auf
    - Ergebnisse werden geloggt
    """

    def __init__(self) -> None:
        super().__init__()

        self.title("SpacesTabifier – Minimal GUI")
        self.geometry("900x520")

        self.cfg = load_config()
        self.selected_files: list[str] = []
        self._is_running = False

        self._build_ui()

    def _build_ui(self) -> None:
        top = tk.Frame(self)
        top.pack(fill="x", padx=10, pady=10)

        btn_pick = tk.Button(top, text="Dateien auswählen…", command=self.on_pick_files)
        btn_pick.pack(side="left")

        btn_clear = tk.Button(top, text="Liste leeren", command=self.on_clear_list)
        btn_clear.pack(side="left", padx=(8, 0))

        self.btn_run = tk.Button(top, text="Tabs setzen", command=self.on_run)
        self.btn_run.pack(side="left", padx=(8, 0))

        tk.Label(top, text="Tabbreite:").pack(side="left", padx=(16, 4))
        self.ent_width = tk.Entry(top, width=4)
        self.ent_width.pack(side="left")
        self.ent_width.insert(0, str(self.cfg.tab_width))

        self.var_dry = tk.BooleanVar(value=False)
        tk.Checkbutton(top, text="Nur prüfen", variable=self.var_dry).pack(side="left", padx=(8, 0))

        # Statuszeile
        self.lbl_status = tk.Label(top, text="Bereit.")
        self.lbl_status.pack(side="right")

        middle = tk.Frame(self)
        middle.pack(fill="both", expand=True, padx=10, pady=(0, 10))

        # Dateiliste
        left = tk.Frame(middle)
        left.pack(side="left", fill="both", expand=True)

        tk.Label(left, text="Ausgewählte Dateien:").pack(anchor="w")

        self.listbox = tk.Listbox(left, height=12)
        self.listbox.pack(fill="both", expand=True)

        # Log
        right = tk.Frame(middle)
        right.pack(side="left", fill="both", expand=True, padx=(10, 0))

        tk.Label(right, text="Log:").pack(anchor="w")

        self.txt_log = tk.Text(right, height=12, wrap="word")
        self.txt_log.pack(fill="both", expand=True)

    def on_pick_files(self) -> None:
        if self._is_running:
            return

        files = filedialog.askopenfilenames(
            title="Dateien auswählen",
            filetypes=[("C/C++/C#", "*.c *.h *.cpp *.hpp *.cs"), ("Alle Dateien", "*.*")],
        )
        if not files:
            return

        for f in files:
            if f not in self.selected_files:
                self.selected_files.append(f)

        self._refresh_listbox()
        self._log(f"{len(files)} Datei(en) hinzugefügt. Gesamt: {len(self.selected_files)}")

    def on_clear_list(self) -> None:
        if self._is_running:
            return

        self.selected_files = []
        self._refresh_listbox()
        self._log("Liste geleert.")

    def on_run(self) -> None:
        if self._is_running:
            return

        try:
            tab_width = check_tab_width(int(self.ent_width.get().strip()))
        except (ValueError, InvalidConfiguration) as e:
            messagebox.showerror("Fehler", f"Ungültige Tabbreite:\n{e}")
            return

        if not self.selected_files:
            messagebox.showinfo("Info", "Bitte zuerst Dateien auswählen.")
            return

        # In separatem Thread ausführen, damit GUI nicht einfriert
        self._is_running = True
        self.btn_run.config(state="disabled")
        self.lbl_status.config(text="Läuft…")

        t = threading.Thread(target=self._run_batch, args=(tab_width, self.var_dry.get()), daemon=True)
        t.start()

    def _run_batch(self, tab_width: int, dry_run: bool) -> None:
        total = len(self.selected_files)
        done = 0

        self._log(f"=== Start (Tabbreite {tab_width}{', nur prüfen' if dry_run else ''}) ===")

        for path in self.selected_files:
            done += 1
            self._set_status(f"{done}/{total} …")

            self._log(f"[{done}/{total}] {path}")
            try:
                result = tabify_file(path, tab_width, dry_run=dry_run, encoding=self.cfg.encoding)
                self._log(f"  -> status={result.status}")
                details = result.details or {}
                if "reason" in details:
                    self._log(f"     reason={details.get('reason')}")
                if "error" in details:
                    self._log(f"     error={details.get('error')}")
                if "candidate_lines" in details:
                    self._log(f"     Kandidaten: {details.get('candidate_lines')}")
                if details.get("changed_lines"):
                    lines = [i + 1 for i in details["changed_lines"]]
                    self._log(f"     Zeilen: {lines}")
            except Exception as e:
                self._log(f"  -> EXCEPTION: {e}")

        self._log("=== Fertig ===")

        # GUI wieder freigeben
        self._is_running = False
        self._set_status("Fertig.")
        self._enable_run_button()

    def _refresh_listbox(self) -> None:
        self.listbox.delete(0, tk.END)
        for f in self.selected_files:
            self.listbox.insert(tk.END, f)

    def _log(self, msg: str) -> None:
        def _append() -> None:
            self.txt_log.insert(tk.END, msg + "\n")
            self.txt_log.see(tk.END)

        self.after(0, _append)

    def _set_status(self, msg: str) -> None:
        self.after(0, lambda: self.lbl_status.config(text=msg))

    def _enable_run_button(self) -> None:
        self.after(0, lambda: self.btn_run.config(state="normal"))


if __name__ == "__main__":
    app = MinimalBatchGUI()
    app.mainloop()
