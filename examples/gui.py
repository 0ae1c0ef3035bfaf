# examples/gui.py
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk, messagebox

from ncube.colors import DEFAULT_COLOR, ColorScheme
from ncube.config import MAX_DIMENSION, MIN_DIMENSION, Settings
from ncube.geom import InvalidArgument
from ncube.logging_config import setup_logging
from ncube.state import HypercubeState, ProjectionMode

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'
from mpl_toolkits.mplot3d.art3d import Line3DCollection

FRAME_MS = 16          # ~60 кадрів/с
VIEW_LIMIT = 1.5       # півширина кубічної області перегляду
BACKGROUND = "#1a1a1a"


class HypercubeApp(tk.Tk):
    def __init__(self, settings: Settings | None = None):
        super().__init__()
        self.title("N-Dimensional Hypercube")
        self.geometry("1000x700")

        self.settings = settings or Settings()
        self.cube = HypercubeState(self.settings)

        self.fig = None
        self.ax = None
        self.canvas = None
        self.lines = None
        self.plane_vars: dict = {}

        self._build_widgets()
        self._rebuild_plane_controls()
        self._animate()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        controls = ttk.Frame(main)
        controls.pack(side="left", fill="y", padx=(0, 10))

        # --- Розмірність ---
        dim_frame = ttk.LabelFrame(controls, text="Розмірність")
        dim_frame.pack(fill="x", pady=5)
        self.dim_var = tk.IntVar(value=self.cube.n)
        self.dim_label = ttk.Label(dim_frame, text=str(self.cube.n), width=3)
        self.dim_label.pack(side="right", padx=5)
        ttk.Scale(
            dim_frame, from_=MIN_DIMENSION, to=MAX_DIMENSION,
            orient="horizontal", variable=self.dim_var,
            command=self._on_dimension,
        ).pack(fill="x", padx=5, pady=5)

        # --- Глобальна швидкість ---
        speed_frame = ttk.LabelFrame(controls, text="Швидкість обертання")
        speed_frame.pack(fill="x", pady=5)
        self.speed_var = tk.DoubleVar(value=self.cube.global_speed)
        self.speed_label = ttk.Label(speed_frame, text=f"{self.cube.global_speed:.3f}", width=6)
        self.speed_label.pack(side="right", padx=5)
        ttk.Scale(
            speed_frame, from_=0.0, to=0.05,
            orient="horizontal", variable=self.speed_var,
            command=self._on_global_speed,
        ).pack(fill="x", padx=5, pady=5)

        # --- Проєкція / кольори ---
        view_frame = ttk.LabelFrame(controls, text="Вигляд")
        view_frame.pack(fill="x", pady=5)

        ttk.Label(view_frame, text="Проєкція:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        self.proj_var = tk.StringVar(value=self.cube.projection_mode.value)
        proj_box = ttk.Combobox(
            view_frame, textvariable=self.proj_var, state="readonly",
            values=[m.value for m in ProjectionMode], width=14,
        )
        proj_box.grid(row=0, column=1, sticky="w", padx=5, pady=2)
        proj_box.bind("<<ComboboxSelected>>", self._on_projection)

        ttk.Label(view_frame, text="Кольори:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        self.color_var = tk.StringVar(value=self.cube.color_scheme.value)
        color_box = ttk.Combobox(
            view_frame, textvariable=self.color_var, state="readonly",
            values=[s.value for s in ColorScheme], width=14,
        )
        color_box.grid(row=1, column=1, sticky="w", padx=5, pady=2)
        color_box.bind("<<ComboboxSelected>>", self._on_color_scheme)

        # --- Площини обертання (перебудовуються при зміні N) ---
        self.planes_frame = ttk.LabelFrame(controls, text="Площини обертання")
        self.planes_frame.pack(fill="both", expand=True, pady=5)

        # --- 3D ---
        plot_frame = ttk.Frame(main)
        plot_frame.pack(side="left", fill="both", expand=True)

        self.fig = Figure(figsize=(6, 6), facecolor=BACKGROUND)
        self.ax = self.fig.add_subplot(111, projection="3d")
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.get_tk_widget().pack(fill="both", expand=True)
        self._setup_axes()

    def _setup_axes(self):
        self.ax.clear()
        self.ax.set_facecolor(BACKGROUND)
        self.ax.set_axis_off()
        self.ax.set_xlim(-VIEW_LIMIT, VIEW_LIMIT)
        self.ax.set_ylim(-VIEW_LIMIT, VIEW_LIMIT)
        self.ax.set_zlim(-VIEW_LIMIT, VIEW_LIMIT)
        self.ax.set_box_aspect((1, 1, 1))
        self._apply_projection_mode()
        self.lines = Line3DCollection([], linewidths=1.0)
        self.ax.add_collection3d(self.lines)

    def _apply_projection_mode(self):
        if self.cube.projection_mode is ProjectionMode.PERSPECTIVE:
            self.ax.set_proj_type("persp")
        else:
            self.ax.set_proj_type("ortho")

    def _rebuild_plane_controls(self):
        """
        Повзунки для кожної площини. Стартове положення — control_default_speed;
        у стан значення потрапляє лише після руху повзунка.
        """
        for child in self.planes_frame.winfo_children():
            child.destroy()
        self.plane_vars = {}

        labels = self.cube.plane_labels()
        if not labels:
            ttk.Label(self.planes_frame, text="Потрібно щонайменше 2 виміри.").pack(padx=5, pady=5)
            return

        for row, (key, label) in enumerate(labels):
            ttk.Label(self.planes_frame, text=f"{label}:").grid(row=row, column=0, sticky="w", padx=5)
            var = tk.DoubleVar(value=self.settings.control_default_speed)
            ttk.Scale(
                self.planes_frame, from_=-1.0, to=1.0, orient="horizontal",
                variable=var, length=140,
                command=lambda value, k=key: self._on_plane_speed(k, value),
            ).grid(row=row, column=1, sticky="ew", padx=5)
            self.plane_vars[key] = var

    # ---------------- Обробники ----------------
    def _on_dimension(self, value):
        n = int(round(float(value)))
        if n == self.cube.n:
            return
        try:
            self.cube.set_dimension(n)
        except InvalidArgument as e:
            messagebox.showerror("Помилка", str(e))
            return
        self.dim_label.configure(text=str(n))
        self._rebuild_plane_controls()

    def _on_global_speed(self, value):
        self.cube.set_global_speed(float(value))
        self.speed_label.configure(text=f"{self.cube.global_speed:.3f}")

    def _on_plane_speed(self, key, value):
        # крок повзунка 0.1, як у звичайному range-input
        self.cube.set_plane_speed(key, round(float(value), 1))

    def _on_projection(self, _event=None):
        self.cube.set_projection_mode(self.proj_var.get())
        self._apply_projection_mode()

    def _on_color_scheme(self, _event=None):
        self.cube.set_color_scheme(self.color_var.get())

    # ---------------- Анімація ----------------
    def _animate(self):
        frame = self.cube.tick()
        segments = [(tuple(a), tuple(b)) for a, b in frame.segments()]
        self.lines.set_segments(segments)
        self.lines.set_color(frame.colors if frame.colors is not None else [DEFAULT_COLOR])
        self.canvas.draw_idle()
        self.after(FRAME_MS, self._animate)


if __name__ == "__main__":
    setup_logging(level=logging.INFO)
    app = HypercubeApp()
    app.mainloop()
