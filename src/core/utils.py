# core/utils.py
from core.vector import Vector3


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects the incoming direction v about the unit normal n and returns
    the reflected direction as a unit vector.
    """
    return (v - n * 2 * v.dot(n)).normalize()


def project_onto_plane(n: Vector3, v: Vector3) -> Vector3:
    """
    Projects v onto the plane through the origin with unit normal n.
    """
    return v - n * n.dot(v)


def format_vec3(label: str, v) -> str:
    return f"{label}\n{v[0]:8.3f} {v[1]:8.3f} {v[2]:8.3f}\n"


def format_vec2(label: str, v) -> str:
    return f"{label}\n{v[0]:8.3f} x {v[1]:8.3f}\n"


def format_scalar(label: str, value: float) -> str:
    return f"{label}\n{value:8.3f}\n"


def format_mat3(label: str, m) -> str:
    lines = [label]
    for row in m.rows:
        lines.append("".join(f"{c:13.3f}" for c in row))
    return "\n".join(lines) + "\n"
