import os
import numpy as np

from sparse_calc import SparseMatrixCalculator, SparseCalcConfig, read_matrix


ifp = os.path.join(os.path.dirname(__file__), 'data')
ofp = os.path.join(os.path.dirname(__file__), 'output')
os.makedirs(ofp, exist_ok=True)

a_fp = os.path.join(ifp, 'a.txt')
b_fp = os.path.join(ifp, 'b.txt')

config = SparseCalcConfig(verbose=True)
calculator = SparseMatrixCalculator(config=config)

for operation in ['add', 'subtract', 'multiply']:
    out_fp = os.path.join(ofp, f'{operation}.txt')
    result = calculator.run(operation, a_fp, b_fp, output_path=out_fp)
    print(result.to_dense())

# cross check the sparse product against numpy
a = read_matrix(a_fp)
b = read_matrix(b_fp)
expected = a.to_dense() @ b.to_dense()
actual = read_matrix(os.path.join(ofp, 'multiply.txt')).to_dense()
print(f"multiply matches numpy: {np.array_equal(expected, actual)}")
