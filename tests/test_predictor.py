from tweetsentiment.inference.predictor import classify, decide, predict, predict_file, score
from tweetsentiment.model import FrequencyModel
from tweetsentiment.schemas import Label, PredictionRecord
from tweetsentiment.training.trainer import train


def _model():
    return FrequencyModel({"good": 3, "day": 1}, {"bad": 2, "day": 2})


def test_score_counts_duplicates():
    assert score(["good", "good", "day"], _model()) == (7, 2)


def test_unseen_tokens_predict_negative():
    assert classify("completely unseen words", _model()) is Label.NEGATIVE
    assert classify("", _model()) is Label.NEGATIVE


def test_tie_predicts_negative():
    model = FrequencyModel({"meh": 2}, {"meh": 2})
    assert score(["meh"], model) == (2, 2)
    assert classify("meh", model) is Label.NEGATIVE
    assert decide(0, 0) is Label.NEGATIVE
    assert decide(1, 0) is Label.POSITIVE


def test_predict_skips_header_and_keeps_order():
    lines = [
        "id,n,date,query,user,text",
        "10,x,d,q,u,good",
        "11,x,d,q,u,bad",
        "12,x,d,q,u,good good bad",
        "13,x,d,q,u,nothing known",
    ]
    records = list(predict(lines, _model()))
    assert records == [
        PredictionRecord("10", Label.POSITIVE),
        PredictionRecord("11", Label.NEGATIVE),
        PredictionRecord("12", Label.POSITIVE),
        PredictionRecord("13", Label.NEGATIVE),
    ]
    assert len(records) == len(lines) - 1


def test_record_line_format():
    assert PredictionRecord("1467810369", Label.POSITIVE).to_line() == "4, 1467810369"
    assert PredictionRecord("7", Label.NEGATIVE).to_line() == "0, 7"


def test_end_to_end_great_terrible(training_lines):
    model = train(training_lines)
    test_lines = ["header", "1,x,d,q,u,great", "2,x,d,q,u,terrible", "3,x,d,q,u,neutral"]
    codes = [record.code for record in predict(test_lines, model)]
    assert codes == [4, 0, 0]


def test_predict_file(write_lines, temp_dir, console):
    test_path = write_lines("test.csv", ["header", "a,x,d,q,u,good day", "b,x,d,q,u,bad day"])
    results_path = temp_dir / "results.csv"

    written = predict_file(test_path, results_path, _model(), console=console)

    assert written == 2
    assert results_path.read_text(encoding="utf-8").splitlines() == ["4, a", "0, b"]


def test_predict_file_missing_input(temp_dir, capsys, console):
    results_path = temp_dir / "results.csv"
    assert predict_file(temp_dir / "missing.csv", results_path, _model(), console=console) is None
    assert not results_path.exists()
    assert "error opening test or results file" in capsys.readouterr().err


def test_predict_file_unwritable_output(write_lines, temp_dir, capsys, console):
    test_path = write_lines("test.csv", ["header", "a,x,d,q,u,good"])
    assert predict_file(test_path, temp_dir / "nope" / "results.csv", _model(), console=console) is None
    assert "error opening" in capsys.readouterr().err


def test_predict_file_keeps_carriage_return_inside_text(temp_dir, console):
    test_path = temp_dir / "test.csv"
    test_path.write_bytes(b"header\r\n1,x,d,q,u,good\rday\r\n2,x,d,q,u,bad\r\n")
    results_path = temp_dir / "results.csv"

    written = predict_file(test_path, results_path, _model(), console=console)

    assert written == 2
    assert results_path.read_bytes() == b"4, 1\n0, 2\n"


def test_predict_file_writes_configured_delimiter(write_lines, temp_dir, console):
    test_path = write_lines("test.csv", ["header", "a|x|d|q|u|good", "b|x|d|q|u|bad"])
    results_path = temp_dir / "results.csv"

    predict_file(test_path, results_path, _model(), delimiter="|", console=console)

    assert results_path.read_text(encoding="utf-8").splitlines() == ["4| a", "0| b"]
    assert PredictionRecord("a", Label.POSITIVE).to_line("|") == "4| a"
