from __future__ import annotations

import numpy as np

from hotplate.relax import hot_plate


def main() -> None:
    # bottom, top, left, right
    T = hot_plate(4, 4, 100.0, 200.0, 300.0, 400.0, 1e-3)
    np.set_printoptions(precision=2, suppress=True)
    print("T[x, y] (x = column index below, y increasing upward):")
    print(np.flipud(T.T))


if __name__ == "__main__":
    main()
