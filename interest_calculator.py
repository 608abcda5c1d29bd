import logging
import tkinter as tk
from tkinter import ttk

import config
from calculator_form import build_forms

logger = logging.getLogger(__name__)


class CalculatorTab:
    """One notebook page bound to an InterestForm"""

    def __init__(self, notebook, form):
        self.form = form
        self.frame = ttk.Frame(notebook, padding=config.PADDING)
        notebook.add(self.frame, text=form.title)

        self.vars = {}
        self.error_labels = {}
        self._syncing = False

        self.create_input_fields()
        self.create_rate_slider()

        calculate_btn = ttk.Button(self.frame, text="Calculate", command=self.calculate_interest)
        calculate_btn.grid(row=self.next_row, column=0, columnspan=2, pady=16)
        self.next_row += 1

        self.create_results_frame()

    def create_input_fields(self):
        """Create one entry and error label per form field"""
        row = 0
        for name, label in self.form.labels():
            ttk.Label(self.frame, text=label).grid(row=row, column=0, sticky=tk.W, pady=(8, 0))
            var = tk.StringVar(value=self.form.values[name])
            var.trace_add('write', lambda *_, n=name: self.on_field_change(n))
            entry = ttk.Entry(self.frame, textvariable=var, width=30)
            entry.grid(row=row, column=1, sticky=(tk.W, tk.E), padx=(10, 0), pady=(8, 0))
            self.vars[name] = var

            error_label = ttk.Label(self.frame, text="", foreground="red")
            error_label.grid(row=row + 1, column=1, sticky=tk.W, padx=(10, 0))
            self.error_labels[name] = error_label
            row += 2
        self.next_row = row

    def create_rate_slider(self):
        self.rate_scale = ttk.Scale(self.frame, from_=config.RATE_SLIDER_MIN, to=config.RATE_SLIDER_MAX,
                                    orient=tk.HORIZONTAL, command=self.on_slider_move)
        self._syncing = True
        try:
            self.rate_scale.set(self.form.slider_value())
        finally:
            self._syncing = False
        self.rate_scale.grid(row=self.next_row, column=0, columnspan=2, sticky=(tk.W, tk.E), pady=8)
        self.rate_caption = ttk.Label(self.frame, text=self.form.rate_caption())
        self.rate_caption.grid(row=self.next_row + 1, column=0, columnspan=2, sticky=tk.W)
        self.next_row += 2

    def create_results_frame(self):
        """Create results display frame"""
        self.results_frame = ttk.LabelFrame(self.frame, text="Results", padding="10")
        self.result_labels = []
        for i in range(2):
            label = ttk.Label(self.results_frame, text="")
            label.grid(row=i, column=0, sticky=tk.W, pady=2)
            self.result_labels.append(label)
        self.results_row = self.next_row

    def on_field_change(self, name):
        if self._syncing:
            return
        self.form.set_field(name, self.vars[name].get())
        self.error_labels[name].config(text="")
        if name == 'rate':
            self._syncing = True
            try:
                self.rate_scale.set(self.form.slider_value())
            finally:
                self._syncing = False
            self.rate_caption.config(text=self.form.rate_caption())

    def on_slider_move(self, value):
        if self._syncing:
            return
        self.form.set_rate_from_slider(value)
        self._syncing = True
        try:
            self.vars['rate'].set(self.form.values['rate'])
        finally:
            self._syncing = False
        self.error_labels['rate'].config(text="")
        self.rate_caption.config(text=self.form.rate_caption())

    def calculate_interest(self):
        """Calculate interest"""
        result = self.form.calculate()
        errors = self.form.visible_errors()
        for name, label in self.error_labels.items():
            label.config(text=errors.get(name, ""))

        if result is None:
            logger.info("%s calculation blocked, missing: %s", self.form.title, sorted(errors))
            self.results_frame.grid_remove()
            return

        for label, line in zip(self.result_labels, self.form.result_lines()):
            label.config(text=line)
        self.results_frame.grid(row=self.results_row, column=0, columnspan=2, sticky=(tk.W, tk.E), pady=20)
        # Move focus off the entries once a result is shown
        self.frame.focus_set()


class InterestCalculator:
    def __init__(self, root, policy=None):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        self.main_frame = ttk.Frame(root, padding=config.PADDING)
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        title_label = ttk.Label(self.main_frame, text=config.APP_NAME,
                               font=('Arial', 20, 'bold'))
        title_label.pack(anchor=tk.W, pady=(0, 8))

        notebook = ttk.Notebook(self.main_frame)
        notebook.pack(fill=tk.BOTH, expand=True)
        self.tabs = [CalculatorTab(notebook, form) for form in build_forms(policy)]

    def on_closing(self):
        """Handle application closing"""
        self.root.destroy()


def main():
    config.configure_logging()
    root = tk.Tk()
    app = InterestCalculator(root)

    # Set closing protocol
    root.protocol("WM_DELETE_WINDOW", app.on_closing)

    root.mainloop()


if __name__ == "__main__":
    main()
