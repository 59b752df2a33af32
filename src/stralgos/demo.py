import argparse
import logging

from stralgos import (
    binary_search,
    edit_distance,
    kmp_search,
    lcs_length,
    longest_common_prefix,
    longest_palindromic_substring,
    new_memo,
    rabin_karp,
)


def run_demo():
    logging.info("==== String Algorithms Demo ====")

    text, pattern = "ABCFGHIJKLMNOPQRSTUVWXZXYZOPQRSTUWXYZ", "XYZOPQRS"
    logging.info(f"Rabin-Karp: '{pattern}' in '{text}' -> {rabin_karp(pattern, text, 101)}")

    arr = list(range(1, 11))
    logging.info(f"Binary search: 5 in {arr} -> {binary_search(arr, 5)}")

    text, pattern = "ABABDABACDABABCABCABCABCABC", "ABABCABC"
    logging.info(f"KMP: '{pattern}' in '{text}' -> {kmp_search(pattern, text)}")

    s1, s2 = "ABCDGH", "AEDFHR"
    logging.info(f"LCS length of '{s1}' and '{s2}' -> {lcs_length(s1, s2)}")

    strings = ["flower", "flow", "flight"]
    logging.info(f"Longest common prefix of {strings} -> '{longest_common_prefix(strings)}'")

    s1, s2 = "kitten", "sitting"
    memo = new_memo(len(s1), len(s2))
    logging.info(f"Edit distance '{s1}' -> '{s2}': {edit_distance(s1, s2, len(s1), len(s2), memo)}")

    text = "babad"
    logging.info(f"Longest palindromic substring of '{text}' -> '{longest_palindromic_substring(text)}'")


def main():
    parser = argparse.ArgumentParser(description="Run example invocations of the string algorithms")
    parser.add_argument("--verbose", action="store_true", help="Also show debug records from the library")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler()
        ]
    )

    if args.verbose:
        logging.getLogger("stralgos").setLevel(logging.DEBUG)
    run_demo()


if __name__ == "__main__":
    main()
