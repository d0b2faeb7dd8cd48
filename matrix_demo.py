# matrix_demo.py
# Multiplies a fixed 2x3 matrix by a fixed 3x2 matrix and prints the 2x2 product row by row.

from algosnippets.matrix import format_rows, matrix_mul

A = [[1, 2, 3], [4, 5, 6]]
B = [[10, 11], [20, 21], [30, 31]]

def main():
    print(format_rows(matrix_mul(A, B)))

if __name__ == "__main__":
    main()
