# tests/test_demos.py
import matrix_demo
import topk_demo

def test_topk_demo_output(capsys):
    topk_demo.main()
    assert capsys.readouterr().out == "Top 3 elements are:\n6\n7\n9\n"

def test_matrix_demo_output(capsys):
    matrix_demo.main()
    assert capsys.readouterr().out == "140 146\n320 335\n"
