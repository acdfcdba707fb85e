import time
import numpy as np
from src.constants import _PC_TO_NOTE
from src.sonority import density

def run_benchmark():
    # Setup
    np.random.seed(42)
    # Generate 20,000 random 6-note collections
    pcs = np.random.randint(0, 12, size=(20000, 6))
    octaves = np.random.randint(2, 7, size=(20000, 6))
    collections = [
        [f"{_PC_TO_NOTE[pc]}{octv}" for pc, octv in zip(row_pc, row_oct)]
        for row_pc, row_oct in zip(pcs, octaves)
    ]

    # Pre-warm
    density(collections[0])

    # Benchmark
    start_time = time.perf_counter()
    for notes in collections:
        density(notes)
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Benchmark duration: {duration:.4f} seconds")

if __name__ == '__main__':
    run_benchmark()
