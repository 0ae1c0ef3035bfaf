from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .geom import Edge, Vertex, InvalidArgument, check_dimension, hamming

logger = logging.getLogger(__name__)

HALF = 0.5


def hypercube_vertices(n: int) -> List[Vertex]:
    """
    2^n вершин одиничного куба з центром у початку координат.
    Вершина i: координата k = +0.5, якщо біт k індексу i = 1, інакше -0.5
    (біт 0 — молодший). Для n = 0 — одна вершина без координат.
    """
    n = check_dimension(n)
    return [
        [HALF if (i >> k) & 1 else -HALF for k in range(n)]
        for i in range(1 << n)
    ]


def hypercube_edges(n: int) -> List[Edge]:
    """
    Ребра через інверсію бітів: для кожної вершини i і кожного біта k
    сусід j = i ^ (1 << k); беремо пару лише коли i < j. O(2^n * n).
    Результат відсортований лексикографічно, як і в переборі.
    """
    n = check_dimension(n)
    edges: List[Edge] = []
    for i in range(1 << n):
        for k in range(n):
            j = i ^ (1 << k)
            if i < j:
                edges.append((i, j))
    edges.sort()
    return edges


def hypercube_edges_bruteforce(
    vertices: Sequence[Sequence[float]],
    n: int,
    backend: str = "python",
) -> List[Edge]:
    """
    Означення «в лоб»: пара (i, j) — ребро, якщо вершини відрізняються рівно
    в одній координаті. O(4^n * n), лише для перевірок.

    backend="scipy" рахує попарну відстань Геммінга через pdist.
    """
    n = check_dimension(n)
    m = len(vertices)

    if backend.lower() == "python":
        edges: List[Edge] = []
        for i in range(m):
            for j in range(i + 1, m):
                if hamming(vertices[i][:n], vertices[j][:n]) == 1:
                    edges.append((i, j))
        return edges

    elif backend.lower() == "scipy":
        if m < 2 or n == 0:
            return []
        try:
            import numpy as np
            from scipy.spatial.distance import pdist
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='python'."
            ) from e

        arr = np.asarray([list(v[:n]) for v in vertices], dtype=float)
        # pdist(hamming) = частка різних координат; ребро <=> рівно 1 з n
        diff = np.rint(pdist(arr, metric="hamming") * n).astype(int)
        ii, jj = np.triu_indices(m, k=1)  # той самий порядок, що й у condensed-матриці
        mask = diff == 1
        return [(int(i), int(j)) for i, j in zip(ii[mask], jj[mask])]

    else:
        raise ValueError(f"Невідомий backend: {backend}")


@dataclass
class Hypercube:
    """
    Базовий (стабільний) рівень геометрії: вершини й ребра N-куба.
    Перебудовується цілком лише при зміні розмірності; обертання працює
    на копіях, тож vertices тут завжди рівно ±0.5.
    """
    n: int
    vertices: List[Vertex] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    @classmethod
    def build(cls, n: int) -> "Hypercube":
        vertices = hypercube_vertices(n)
        edges = hypercube_edges(n)
        logger.debug(f"Built {n}D hypercube: {len(vertices)} vertices, {len(edges)} edges")
        return cls(n=n, vertices=vertices, edges=edges)

    def degrees(self) -> List[int]:
        deg = [0] * len(self.vertices)
        for i, j in self.edges:
            deg[i] += 1
            deg[j] += 1
        return deg

    def incident(self, v: int) -> List[Edge]:
        if not 0 <= v < len(self.vertices):
            raise InvalidArgument(f"vertex index {v} out of range for {self.n}D cube")
        return [e for e in self.edges if v in e]

    # ---------------- Діагностика ----------------
    def validate(self) -> dict:
        """
        Перевірка інваріантів N-куба:
          - рівно 2^n вершин по n координат, кожна ±0.5 за бітовим правилом;
          - кожне ребро (i<j) з'єднує вершини на відстані Геммінга 1;
          - граф n-регулярний, всього n * 2^(n-1) ребер, без дублікатів.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        n = self.n
        expected_v = 1 << n

        bad_vertices: List[int] = []
        for idx, v in enumerate(self.vertices):
            want = [HALF if (idx >> k) & 1 else -HALF for k in range(n)]
            if list(v) != want:
                bad_vertices.append(idx)

        bad_edges: List[Edge] = []
        seen: Dict[Edge, int] = {}
        deg = [0] * len(self.vertices)
        for e in self.edges:
            i, j = e
            seen[e] = seen.get(e, 0) + 1
            if not (0 <= i < j < len(self.vertices)):
                bad_edges.append(e)
            else:
                deg[i] += 1
                deg[j] += 1
                if hamming(self.vertices[i], self.vertices[j]) != 1:
                    bad_edges.append(e)
        duplicate_edges = [e for e, k in seen.items() if k > 1]

        bad_degree = [(i, d) for i, d in enumerate(deg) if d != n]

        return {
            "dimension": n,
            "vertices": len(self.vertices),
            "edges": len(self.edges),
            "vertex_count_ok": len(self.vertices) == expected_v,
            "edge_count_ok": len(self.edges) == (n * (1 << (n - 1)) if n > 0 else 0),
            "bad_vertices": bad_vertices,
            "bad_edges": bad_edges,
            "duplicate_edges": duplicate_edges,
            "bad_degree": bad_degree,
        }
