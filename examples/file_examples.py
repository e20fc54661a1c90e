"""
Example how to read and write .phragmen.yaml files
"""

from pathlib import Path
from tempfile import TemporaryDirectory

from phragmen import fileio
from phragmen.seqphragmen import compute_seqphragmen
from phragmen.output import output, INFO

output.set_verbosity(INFO)

currdir = Path(__file__).parent.absolute()

# read a single file
ballots, num_to_elect, data = fileio.read_phragmen_yaml_file(
    currdir / "phragmen_files" / "council.phragmen.yaml"
)
print(data["description"])
result = compute_seqphragmen(ballots, num_to_elect)

# store the election together with its result
with TemporaryDirectory() as tmpdirname:
    filename = Path(tmpdirname) / "council-result.phragmen.yaml"
    fileio.write_phragmen_yaml_file(
        filename, ballots, num_to_elect=num_to_elect, result=result, description="with result"
    )
    _, _, data = fileio.read_phragmen_yaml_file(filename)
    print(f"stored result: {', '.join(data['result'])}")
