"""Example usage of the hmmflow package.

This example demonstrates Viterbi decoding on two small models:
- Two biased coins, swapped behind a curtain
- Coding and non-coding regions of a DNA fragment
"""

from hmmflow import HiddenMarkovModel, Matrix, Vector


def coins_example():
    """Decode which coin was tossed from a run of heads and tails."""
    print("=" * 60)
    print("Two Coins Example")
    print("=" * 60)

    # Coin 0 is fair, coin 1 lands tails 75% of the time.
    # Labels: 0 = heads, 1 = tails
    hmm = HiddenMarkovModel(
        Vector([0.5, 0.5]),
        Matrix([[0.75, 0.25],
                [0.25, 0.75]]),
        Matrix([[0.5, 0.5],
                [0.25, 0.75]]),
    )
    tosses = [0, 0, 1, 1, 1]
    coins = hmm.map_estimate(tosses)
    print(f"\n   Tosses:     {tosses}")
    print(f"   Coins used: {coins}")


def bio_example():
    """Label each base of a DNA fragment as coding or non-coding."""
    print("\n" + "=" * 60)
    print("DNA Coding Region Example")
    print("=" * 60)

    # Bases: A = 0, C = 1, G = 2, T = 3
    # States: coding = 0, non-coding = 1
    hmm = HiddenMarkovModel.from_probabilities(
        [0.5, 0.5],
        [[0.98, 0.02],
         [0.02, 0.98]],
        [[0.18, 0.32, 0.32, 0.18],
         [0.25, 0.25, 0.25, 0.25]],
    )
    bases = "ATGCGA"
    observations = ["ACGT".index(b) for b in bases]
    states = hmm.map_estimate(observations)
    print(f"\n   Sequence:    {bases}")
    print(f"   States used: {states}")


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("hmmflow Package Examples")
    print("=" * 60)

    coins_example()
    bio_example()

    print("\n" + "=" * 60)
    print("Examples completed successfully!")
    print("=" * 60 + "\n")
