# topk_demo.py
# Prints the 3 largest values of a fixed list, smallest first, via algosnippets.top_k.

from algosnippets.topk import top_k

NUMS = [4, 1, 7, 3, 9, 2, 6]
K = 3

def main():
    print(f"Top {K} elements are:")
    for num in top_k(NUMS, K):
        print(num)

if __name__ == "__main__":
    main()
