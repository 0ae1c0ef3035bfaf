# examples/demo_edges.py
from ncube.hypercube import Hypercube, hypercube_edges_bruteforce

if __name__ == "__main__":
    for n in range(1, 7):
        cube = Hypercube.build(n)
        brute = hypercube_edges_bruteforce(cube.vertices, n, backend="scipy")
        same = set(brute) == set(cube.edges)
        report = cube.validate()
        print(f"{n}D: vertices={report['vertices']} edges={report['edges']} "
              f"bit-flip == brute-force: {same}  bad_degree={report['bad_degree']}")
