import io

import numpy as np

def matrix_chain_order(p):
    """
    Tính bảng chi phí m và bảng vị trí cắt s cho chuỗi ma trận.

    Parameters:
    - p: dãy kích thước (n+1 số nguyên dương), ma trận Ak có kích thước p[k-1] x p[k].

    Returns:
    - m: ma trận (n+1, n+1), m[i, j] = số phép nhân vô hướng tối thiểu để tính Ai..Aj.
    - s: ma trận (n+1, n+1), s[i, j] = vị trí cắt k tối ưu (i <= k < j).
    """
    p = [int(x) for x in p]  # dùng int của Python để không bị tràn số
    n = len(p) - 1
    m = np.zeros((n + 1, n + 1), dtype=object)  # Ma trận lưu số phép nhân tối thiểu (int của Python)
    s = np.zeros((n + 1, n + 1), dtype=np.int64)  # Ma trận lưu vị trí cắt tốt nhất

    # m[i, i] = 0: một ma trận đơn lẻ không cần phép nhân nào
    for l in range(2, n + 1):  # l là độ dài chuỗi ma trận
        for i in range(1, n - l + 2):
            j = i + l - 1
            m[i, j] = float('inf')
            for k in range(i, j):
                q = m[i, k] + m[k + 1, j] + p[i - 1] * p[k] * p[j]
                if q < m[i, j]:  # dấu < nên khi bằng nhau giữ k nhỏ nhất
                    m[i, j] = q
                    s[i, j] = k

    return m, s

def min_cost(m):
    n = m.shape[0] - 1
    return int(m[1, n])

def print_optimal_parens(s, i, j, out=None):
    if i == j:
        print(f"A{i}", end="", file=out)
    else:
        print("(", end="", file=out)
        print_optimal_parens(s, i, s[i, j], out)
        print(" × ", end="", file=out)
        print_optimal_parens(s, s[i, j] + 1, j, out)
        print(")", end="", file=out)

def optimal_parens(s, i, j):
    buffer = io.StringIO()
    print_optimal_parens(s, i, j, buffer)
    return buffer.getvalue()

def optimal_tree(s, i, j):
    """ Trả về cây tích dạng tuple lồng nhau, lá là chỉ số ma trận """
    if i == j:
        return i
    k = int(s[i, j])
    return (optimal_tree(s, i, k), optimal_tree(s, k + 1, j))


if __name__ == "__main__":
    # Ví dụ
    #p = [10, 20, 30, 40, 30]
    p = [1, 512, 128, 32, 10]
    m, s = matrix_chain_order(p)

    print("Số phép nhân tối thiểu:", min_cost(m))
    print("Cách đặt dấu ngoặc tối ưu:")
    print_optimal_parens(s, 1, len(p) - 1)
    print()
