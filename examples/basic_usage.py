"""
Basic usage example for vecdist.
"""

import numpy as np

from config import load_config
from vecdist import (
    BatchDistanceCalculator,
    DegenerateInputError,
    IndexOutOfRangeError,
    batch_distance,
    center_rows,
    distance,
    satisfies_triangle_inequality,
)
from vecdist.utils import setup_logger


def main():
    print("=" * 60)
    print("vecdist Basic Usage Example")
    print("=" * 60)

    settings = load_config()
    setup_logger("vecdist", level=settings.log_level)

    # 1. Pairwise kernels
    print("\n1. Pairwise distances...")
    print(f"   euclidean [0,0]-[3,4]:   {distance('euclidean', [0, 0], [3, 4])}")
    print(f"   manhattan [1,2,3]-[0]:   {distance('manhattan', [1, 2, 3], [0, 0, 0])}")
    print(f"   pearson [1,-1]-[2,-2]:   {distance('pearson', [1, -1], [2, -2])}")
    print(f"   cosine [1,0]-[0,1]:      {distance('cosine', [1, 0], [0, 1])}")

    # 2. Batch distances from one origin row
    print("\n2. Batch distances...")
    data = np.random.default_rng(0).standard_normal((200, 16))
    targets = [10, 3, 10, 199]
    print(f"   euclidean from row 0: {batch_distance('euclidean', data, 0, targets)}")

    # Pearson needs zero-mean rows
    centered = center_rows(data)
    print(f"   pearson from row 0:   {batch_distance('pearson', centered, 0, targets)}")

    # 3. Calculator built from configuration
    print("\n3. Calculator from settings...")
    calc = BatchDistanceCalculator.from_settings(settings)
    print(f"   {calc}")
    print(f"   5 nearest to row 0: {np.argsort(calc.compute_all(data, 0))[1:6]}")

    # 4. 1-based indices from an R or Julia caller
    print("\n4. 1-based indices...")
    one_based = BatchDistanceCalculator("manhattan", index_base=1)
    print(f"   rows 2 and 3 from row 1: {one_based.compute(data, 1, [2, 3])}")

    # 5. Errors
    print("\n5. Error handling...")
    try:
        batch_distance("euclidean", data, 0, [1, len(data)])
    except IndexOutOfRangeError as e:
        print(f"   {e}")

    try:
        distance("cosine", [0, 0], [1, 1])
    except DegenerateInputError as e:
        print(f"   {e}")

    for metric in ("euclidean", "cosine"):
        print(f"   {metric} safe for triangle pruning: {satisfies_triangle_inequality(metric)}")


if __name__ == "__main__":
    main()
