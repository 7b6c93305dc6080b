import matplotlib.pyplot as plt
import numpy as np

def tree_cost(p, tree):
    """
    Tính số phép nhân vô hướng của một cây tích.

    Parameters:
    - p: dãy kích thước.
    - tree: lá là chỉ số ma trận (int), nút trong là tuple (trái, phải).

    Returns:
    - (cost, rows, cols): chi phí và kích thước ma trận kết quả.
    """
    if not isinstance(tree, tuple):
        k = int(tree)
        return 0, p[k - 1], p[k]
    left_cost, rows, inner = tree_cost(p, tree[0])
    right_cost, _, cols = tree_cost(p, tree[1])
    return left_cost + right_cost + rows * inner * cols, rows, cols

def left_to_right_cost(p):
    # ((A1 × A2) × A3) × ...
    cost = 0
    for k in range(2, len(p)):
        cost += p[0] * p[k - 1] * p[k]
    return cost

def right_to_left_cost(p):
    # A1 × (A2 × (A3 × ...))
    cost = 0
    last = p[-1]
    for k in range(len(p) - 3, -1, -1):
        cost += p[k] * p[k + 1] * last
    return cost

# Hiển thị giá trị trên cột
def add_labels(ax, values):
    max_val = max(values)
    offset = max_val * 0.02

    for i, v in enumerate(values):
        ax.text(i, v + offset, f"{v:,}", ha='center', fontsize=10)

def plot_cost_comparison(p, optimal_cost, filename=None, show=False):
    labels = ["Trái sang phải", "Phải sang trái", "Tối ưu"]
    values = [left_to_right_cost(p), right_to_left_cost(p), int(optimal_cost)]

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.bar(labels, values, color=['blue', 'orange', 'green'], width=0.5)
    ax.set_title(f"So sánh số phép nhân ({len(p) - 1} ma trận)")
    ax.set_ylabel("Số phép nhân vô hướng")
    ax.grid(axis='y', linestyle='--', alpha=0.7)  # Lưới chỉ trên trục y
    add_labels(ax, values)

    plt.tight_layout()
    if filename is not None:
        fig.savefig(filename, format='svg')
    if show:
        plt.show()
    plt.close(fig)
    return values

def plot_cost_table(m, filename=None, show=False):
    n = m.shape[0] - 1
    # Bỏ hàng/cột 0 và che phần i > j
    data = np.array(m[1:, 1:], dtype=float)
    data[np.tril_indices(n, k=-1)] = np.nan

    fig, ax = plt.subplots(figsize=(8, 6))
    image = ax.imshow(data, cmap='viridis')
    ax.set_xticks(range(n))
    ax.set_xticklabels(range(1, n + 1))
    ax.set_yticks(range(n))
    ax.set_yticklabels(range(1, n + 1))
    ax.set_xlabel('j')
    ax.set_ylabel('i')
    ax.set_title('Bảng chi phí m[i, j]')
    fig.colorbar(image, ax=ax)

    plt.tight_layout()
    if filename is not None:
        fig.savefig(filename, format='svg')
    if show:
        plt.show()
    plt.close(fig)
    return data
