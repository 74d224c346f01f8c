"""
AVL Tree Demo -- Driver run, height growth, deletion walk-through, and a mixed
insert/remove workload.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import logging
import math
import os
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))
from avl_tree import AVLTree, create, destroy, insert, contains, print_tree

SEED = 42
NUM_TEST_ELEMS = 16
VERBOSE = False

VIZ_DIR = Path(__file__).parent / "viz"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def banner(title):
    print("=" * 60)
    print(title)
    print("=" * 60)


# ---------------------------------------------------------------------------
# Example 1: Driver
# ---------------------------------------------------------------------------

def example_1_driver():
    """Insert 0..15 in order, check membership of each, print the tree."""
    banner(f"Example 1: Insert 0..{NUM_TEST_ELEMS - 1} and print")

    tree = create()
    for i in range(NUM_TEST_ELEMS):
        insert(i, tree)

    for i in range(NUM_TEST_ELEMS):
        assert contains(i, tree)

    print_tree(tree)
    print(f"Height: {tree.height()} (bound {math.ceil(math.log2(NUM_TEST_ELEMS + 1)) + 1})")

    destroy(tree)


# ---------------------------------------------------------------------------
# Example 2: Height growth
# ---------------------------------------------------------------------------

def example_2_height_growth():
    """Tree height vs. n for ascending and shuffled inserts."""
    banner("Example 2: Height growth")

    np.random.seed(SEED)
    n_max = 2000
    checkpoints = np.unique(np.logspace(0, math.log10(n_max), 40).astype(int))

    ascending = AVLTree()
    shuffled = AVLTree()
    order = np.random.permutation(n_max).tolist()
    asc_heights, shuf_heights = [], []
    inserted = 0
    for n in checkpoints:
        while inserted < n:
            ascending.insert(inserted)
            shuffled.insert(order[inserted])
            inserted += 1
        asc_heights.append(ascending.height())
        shuf_heights.append(shuffled.height())

    lower = np.ceil(np.log2(checkpoints + 1)) - 1
    upper = 1.44 * np.log2(checkpoints + 2)

    print(f"n = {n_max}: ascending height {asc_heights[-1]}, shuffled height {shuf_heights[-1]}")
    print(f"Lower bound {lower[-1]:.0f}, AVL upper bound {upper[-1]:.2f}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(checkpoints, asc_heights, "o-", color=COLORS["blue"], markersize=3, label="Ascending inserts")
    ax.plot(checkpoints, shuf_heights, "s-", color=COLORS["green"], markersize=3, label="Shuffled inserts")
    ax.plot(checkpoints, lower, "--", color=COLORS["dark"], label="ceil(log2(n + 1)) - 1")
    ax.plot(checkpoints, upper, "--", color=COLORS["red"], label="1.44 log2(n + 2)")
    ax.set_xscale("log")
    ax.set_xlabel("Number of keys")
    ax.set_ylabel("Tree height")
    ax.set_title("AVL Height Stays Logarithmic")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, (asc_heights, shuf_heights)


# ---------------------------------------------------------------------------
# Example 3: Two-child deletion
# ---------------------------------------------------------------------------

def example_3_deletion():
    """Remove the root of {5, 3, 8, 1, 4, 7, 9}; its successor takes its place."""
    banner("Example 3: Removing a node with two children")

    tree = AVLTree()
    for v in [5, 3, 8, 1, 4, 7, 9]:
        tree.insert(v)
    print("Before remove(5):")
    tree.print()

    tree.remove(5)
    print("After remove(5):")
    tree.print()
    print(f"contains(5) = {tree.contains(5)}, balanced = {tree.is_balanced()}")

    return tree


# ---------------------------------------------------------------------------
# Example 4: Mixed workload
# ---------------------------------------------------------------------------

def example_4_mixed_workload():
    """Random inserts and removes, tracking size and height."""
    banner("Example 4: Mixed insert/remove workload")

    np.random.seed(SEED)
    n_ops = 5000
    tree = AVLTree()
    ops = np.random.rand(n_ops) < 0.6
    keys = np.random.randint(0, 1000, size=n_ops)
    sizes, heights = [], []
    for do_insert, key in zip(ops, keys):
        if do_insert:
            tree.insert(key)
        else:
            tree.remove(key)
        sizes.append(len(tree))
        heights.append(tree.height())

    assert tree.is_balanced()
    print(f"Final size {len(tree)}, final height {tree.height()}")

    steps = np.arange(1, n_ops + 1)
    sizes_arr = np.array(sizes)
    bound = 1.44 * np.log2(sizes_arr + 2)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
    ax1.plot(steps, sizes, color=COLORS["blue"])
    ax1.set_xlabel("Operation")
    ax1.set_ylabel("Live nodes")
    ax1.set_title("Tree Size")
    ax1.grid(True, alpha=0.3)

    ax2.plot(steps, heights, color=COLORS["green"], label="Height")
    ax2.plot(steps, bound, "--", color=COLORS["red"], label="1.44 log2(n + 2)")
    ax2.set_xlabel("Operation")
    ax2.set_ylabel("Height")
    ax2.set_title("Height Under Mixed Workload")
    ax2.legend()
    ax2.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_mixed_workload.png", dpi=150)
    plt.close(fig)

    return fig, tree


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    banner("Generating PDF Report")

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "AVL Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Height-Balanced Integer Set", fontsize=24, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for title, filename in figures_data:
            fig = plt.figure(figsize=(11, 8.5))
            fig.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / filename))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    if VERBOSE:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    VIZ_DIR.mkdir(exist_ok=True)

    print("\n" + "#" * 60)
    print("#" + " " * 24 + "AVL TREE DEMO" + " " * 22 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}\n")

    example_1_driver()
    example_2_height_growth()
    example_3_deletion()
    example_4_mixed_workload()

    generate_pdf_report([
        ("Example 2: Height Growth", "02_height_growth.png"),
        ("Example 4: Mixed Workload", "04_mixed_workload.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
