"""
ncube — геометричне ядро обертового N-вимірного гіперкуба.
Вершини/ребра N-куба, композиція поворотів у C(N,2) площинах,
псевдоперспективна проєкція в 3D, кольори ребер.
"""

__version__ = "0.1.0"

from ncube.geom import Pt, InvalidArgument
from ncube.hypercube import Hypercube, hypercube_vertices, hypercube_edges, hypercube_edges_bruteforce
from ncube.rotation import RotationEngine, rotation_planes, parse_plane_key, plane_label
from ncube.projection import project_to_3d
from ncube.colors import ColorScheme, edge_colors
from ncube.config import Settings
from ncube.state import HypercubeState, Frame, ProjectionMode

__all__ = [
    "Pt", "InvalidArgument",
    "Hypercube", "hypercube_vertices", "hypercube_edges", "hypercube_edges_bruteforce",
    "RotationEngine", "rotation_planes", "parse_plane_key", "plane_label",
    "project_to_3d",
    "ColorScheme", "edge_colors",
    "Settings",
    "HypercubeState", "Frame", "ProjectionMode",
    "__version__",
]
