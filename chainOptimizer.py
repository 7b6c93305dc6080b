import numpy as np

from catalan import catalan_number
from compareCost import plot_cost_comparison, plot_cost_table
from matrix_chain_multiplication import matrix_chain_order, min_cost, optimal_parens
from readFile import generate_random_dimensions, random_matrix_count, read_manual_dimensions
from saveFile import display_tables, save_report

OUTPUT_FILE = "matrix_chain_output.txt"
PLOT_FILE = None  # ví dụ "CostComparison.svg"
TABLE_PLOT_FILE = None  # ví dụ "CostTable.svg"

# Khoảng kích thước và số ma trận khi sinh ngẫu nhiên
MIN_DIM = 1
MAX_DIM = 1000
MIN_MATRICES = 5
MAX_MATRICES = 15

def choose_mode(input_fn, out):
    while True:
        print("Matrix Chain Multiplication", file=out)
        print("1. Nhập thủ công", file=out)
        print("2. Sinh ngẫu nhiên", file=out)
        mode = input_fn("Chọn chế độ nhập (1 hoặc 2): ").strip()
        if mode in ("1", "2"):
            return mode
        print(f"Lựa chọn không hợp lệ: '{mode}'", file=out)

def read_dimensions(mode, input_fn, out, rng):
    if mode == "2":
        n = random_matrix_count(rng, MIN_MATRICES, MAX_MATRICES)
        p = generate_random_dimensions(n, MIN_DIM, MAX_DIM, rng)
        print(f"Đã sinh ngẫu nhiên {n} ma trận.", file=out)
        print("Dãy kích thước P:", " ".join(str(d) for d in p), file=out)
        return p

    while True:
        try:
            return read_manual_dimensions(input_fn)
        except ValueError as e:
            print(f"Dữ liệu không hợp lệ: {e}", file=out)

def main(input_fn=input, out=None, rng=None, output_file=OUTPUT_FILE, plot_file=PLOT_FILE,
         table_plot_file=TABLE_PLOT_FILE):
    if rng is None:
        rng = np.random.default_rng()

    mode = choose_mode(input_fn, out)
    p = read_dimensions(mode, input_fn, out, rng)
    n = len(p) - 1

    m, s = matrix_chain_order(p)
    cost = min_cost(m)
    parens = optimal_parens(s, 1, n)
    catalan = catalan_number(n)

    print(f"\nSố phép nhân tối thiểu: {cost}", file=out)
    print(f"Cách đặt dấu ngoặc tối ưu: {parens}", file=out)
    print(f"Số Catalan: {catalan}", file=out)

    show_tables = input_fn("\nHiển thị bảng DP? (y/n): ").strip().lower()
    display_tables(m, s, show=show_tables.startswith("y"), out=out)

    try:
        save_report(output_file, p, cost, parens, catalan)
        print(f"\nĐã lưu kết quả vào file: {output_file}", file=out)
    except OSError as e:
        print(f"\nKhông thể ghi file {output_file}: {e}", file=out)

    if plot_file is not None:
        plot_cost_comparison(p, cost, plot_file)
        print(f"Đã lưu biểu đồ so sánh: {plot_file}", file=out)

    if table_plot_file is not None:
        plot_cost_table(m, table_plot_file)
        print(f"Đã lưu bảng chi phí: {table_plot_file}", file=out)

    return p, m, s


if __name__ == "__main__":
    main()
