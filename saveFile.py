import pandas as pd

def _triangle_frame(table, keep):
    n = table.shape[0] - 1
    index = range(1, n + 1)
    rows = [[int(table[i, j]) if keep(i, j) else "-" for j in index] for i in index]
    return pd.DataFrame(rows, index=index, columns=index)

def cost_table_frame(m):
    # Chỉ có nghĩa khi i <= j
    return _triangle_frame(m, lambda i, j: i <= j)

def split_table_frame(s):
    # Vị trí cắt chỉ có khi i < j
    return _triangle_frame(s, lambda i, j: i < j)

def display_tables(m, s, show=True, out=None):
    if not show:
        return
    print("\nBảng m (chi phí):", file=out)
    print(cost_table_frame(m).to_string(), file=out)
    print("\nBảng s (vị trí cắt):", file=out)
    print(split_table_frame(s).to_string(), file=out)

def format_report(p, cost, parens, catalan):
    """
    Tạo nội dung báo cáo dạng văn bản.

    Thứ tự: dãy kích thước, một dòng trống, chi phí tối thiểu,
    cách đặt dấu ngoặc tối ưu, số Catalan cho n ma trận.
    """
    n = len(p) - 1
    lines = [
        "Matrix dimensions (P): " + " ".join(str(d) for d in p),
        "",
        f"Minimum multiplication cost: {cost}",
        f"Optimal parenthesization: {parens}",
        f"Catalan number (n = {n}): {catalan}",
    ]
    return "\n".join(lines) + "\n"

def save_report(filename, p, cost, parens, catalan):
    # OSError (đường dẫn không ghi được) được đẩy lên cho nơi gọi xử lý
    with open(filename, "w", encoding="utf-8") as f:
        f.write(format_report(p, cost, parens, catalan))
    return filename
