import logging
import re

from flask import Flask, Response, jsonify, render_template, request

from result_checker import config
from result_checker.batch import fetch_batch
from result_checker.fetcher import fetch_one
from result_checker.filters import filter_by_min_marks
from result_checker.report import render_csv, report_filename

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(message)s"
)

app = Flask(__name__)


def parse_roll_numbers(text):
    """Splits the text area input on newlines or commas, dropping blanks."""
    if not text:
        return []
    return [roll.strip() for roll in re.split(r"[\n,]", text) if roll.strip()]


def parse_min_marks(value):
    if value is None or not value.strip():
        return None, None
    try:
        return int(value.strip()), None
    except ValueError:
        return None, "Please enter a valid number for minimum marks."


@app.route('/', methods=['GET', 'POST'])
def index():
    rolls_text = request.values.get('rolls', '')
    min_marks_text = request.values.get('min_marks', '')

    results = []
    shown = []
    message = None
    min_marks = None

    if request.method == 'POST' or rolls_text:
        roll_numbers = parse_roll_numbers(rolls_text)
        if not roll_numbers:
            message = "Please enter at least one roll number."
        else:
            results = fetch_batch(roll_numbers)
            shown = results

            min_marks, message = parse_min_marks(min_marks_text)
            if min_marks is not None:
                shown = filter_by_min_marks(results, min_marks)

    return render_template('results.html',
                           results=results,
                           shown=shown,
                           rolls=rolls_text,
                           min_marks=min_marks_text,
                           filtered=min_marks is not None,
                           message=message,
                           subject=config.SUBJECT.title(),
                           portal_url=config.PORTAL_URL)


@app.route('/export')
def export_csv():
    roll_numbers = parse_roll_numbers(request.args.get('rolls', ''))
    if not roll_numbers:
        return jsonify({"error": "Missing 'rolls' query parameter"}), 400

    min_marks, error = parse_min_marks(request.args.get('min_marks'))
    if error:
        return jsonify({"error": error}), 400

    records = fetch_batch(roll_numbers)
    if min_marks is not None:
        records = filter_by_min_marks(records, min_marks)

    return Response(
        render_csv(records),
        mimetype="text/csv",
        headers={"Content-disposition": f"attachment; filename={report_filename(min_marks)}"}
    )


@app.route('/api/result/<roll_no>')
def single_result(roll_no):
    return jsonify(fetch_one(roll_no).to_dict())


if __name__ == '__main__':
    app.run(debug=True)
