# examples/demo_hull.py
import logging

from ndhull import HullConfig, Outcome, create, create_from_arrays, unique_points

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    raw = [
        (0,0,0), (1,0,0), (1,1,0), (0,1,0),
        (0,0,1), (1,0,1), (1,1,1), (0,1,1),
        (0.5,0.5,0.5), (0.2,0.8,0.3), (0.8,0.2,0.7)
    ]
    result = create(unique_points(raw))
    if result.outcome is Outcome.SUCCESS:
        hull = result.hull
        print(f"{len(hull.points)} vertices, {len(hull.faces)} faces")
        print("VALIDATION:", hull.validate())
    else:
        print("FAILED:", result.outcome.name, result.error_message)

    # same data through Qhull
    qh = create_from_arrays(raw, config=HullConfig(backend="scipy"))
    print("scipy backend:", qh.outcome.name, len(qh.hull.faces) if qh.ok else qh.error_message)

    # collinear input is reported, not raised
    flat = create_from_arrays([(0, 0), (1, 1), (2, 2)])
    print("collinear:", flat.outcome.name, "-", flat.error_message)
