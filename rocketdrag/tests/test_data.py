import os
import shutil
import tempfile
import unittest

import numpy as np
import pandas as pd

import rocketdrag as rd
from rocketdrag import data

TEST_DIR = os.path.dirname(os.path.abspath(__file__))
FLIGHT_CSV = os.path.join(TEST_DIR, "testflight.csv")
SAMPLE_CSV = os.path.join(TEST_DIR, "vel-drag_sample.csv")


class LoadCsvTest(unittest.TestCase):
    def test_openrocket_export(self):
        flight_data = rd.load_flight_data(FLIGHT_CSV)

        self.assertEqual(len(flight_data), 11)
        for column in data.FLIGHT_COLUMNS:
            self.assertIn(column, flight_data.columns)
            self.assertEqual(flight_data[column].dtype, np.float64)

        self.assertEqual(flight_data[data.TIME].tolist(), [float(t) for t in range(11)])
        self.assertEqual(flight_data[data.ZENITH][3], 88.5)

    def test_samples(self):
        samples = rd.load_samples(SAMPLE_CSV)
        self.assertEqual(samples[data.VELOCITY].tolist(), [0.0, 1.0, 2.0, 3.0])
        self.assertEqual(samples[data.ADDED_FORCE].tolist(), [0.0, 6.0, 18.0, 36.0])

    def test_missing_file(self):
        with self.assertRaises(rd.NotFoundError):
            rd.load_samples(os.path.join(TEST_DIR, "does-not-exist.csv"))

    def test_not_found_is_file_not_found(self):
        with self.assertRaises(FileNotFoundError):
            rd.load_table(os.path.join(TEST_DIR, "does-not-exist.xlsx"))

    def test_units_must_match(self):
        # The sample table has no OpenRocket columns
        with self.assertRaises(rd.DataFormatError):
            rd.load_flight_data(SAMPLE_CSV)


class LoadFileTest(unittest.TestCase):
    def setUp(self):
        self.directory = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.directory)

    def path(self, name):
        return os.path.join(self.directory, name)

    def write_csv(self, name, text):
        with open(self.path(name), "w", encoding="utf-8") as f:
            f.write(text)
        return self.path(name)

    def test_workbook_sheet_by_name(self):
        flight_data = rd.load_flight_data(FLIGHT_CSV)
        with pd.ExcelWriter(self.path("sim.xlsx")) as writer:
            pd.DataFrame({"comments": ["exported by OpenRocket"]}).to_excel(writer, sheet_name="sim", index=False)
            flight_data.to_excel(writer, sheet_name="raw-data", index=False)

        loaded = rd.load_flight_data(self.path("sim.xlsx"))
        pd.testing.assert_frame_equal(loaded, flight_data, check_dtype=False)

    def test_workbook_sheet_by_index(self):
        pd.DataFrame({"velocity": [0.0, 1.0, 2.0], "added_force": [0.0, 1.5, 6.0]}).to_excel(
            self.path("samples.xlsx"), index=False
        )

        samples = rd.load_samples(self.path("samples.xlsx"))
        self.assertEqual(samples[data.ADDED_FORCE].tolist(), [0.0, 1.5, 6.0])

    def test_missing_sheet(self):
        pd.DataFrame({"velocity": [0.0], "added_force": [0.0]}).to_excel(
            self.path("samples.xlsx"), sheet_name="cfd", index=False
        )

        with self.assertRaises(rd.NotFoundError):
            rd.load_samples(self.path("samples.xlsx"), "raw-data")
        with self.assertRaises(rd.NotFoundError):
            rd.load_samples(self.path("samples.xlsx"), 1)

    def test_missing_column(self):
        path = self.write_csv("samples.csv", "velocity,force\n1.0,2.0\n")
        with self.assertRaises(rd.DataFormatError):
            rd.load_samples(path)

    def test_non_numeric(self):
        path = self.write_csv("samples.csv", "velocity,added_force\n1.0,2.0\n2.0,lots\n")
        with self.assertRaises(rd.DataFormatError) as context:
            rd.load_samples(path)
        self.assertIn("lots", str(context.exception))

    def test_non_numeric_in_workbook(self):
        pd.DataFrame({"velocity": [1.0, "fast"], "added_force": [2.0, 3.0]}).to_excel(
            self.path("samples.xlsx"), index=False
        )
        with self.assertRaises(rd.DataFormatError):
            rd.load_samples(self.path("samples.xlsx"))

    def test_ragged_csv(self):
        path = self.write_csv("samples.csv", "velocity,added_force\n1,2\n2,3,4,5\n")
        with self.assertRaises(rd.DataFormatError):
            rd.load_samples(path)

    def test_csv_not_utf8(self):
        with open(self.path("samples.csv"), "wb") as f:
            f.write(b"velocity,added_force\n1,2\n\xff\xfe,3\n")
        with self.assertRaises(rd.DataFormatError):
            rd.load_samples(self.path("samples.csv"))

    def test_corrupt_workbook(self):
        with open(self.path("samples.xlsx"), "w") as f:
            f.write("not a zip")
        with self.assertRaises(rd.DataFormatError):
            rd.load_samples(self.path("samples.xlsx"))

    def test_unsupported_file_type(self):
        for name in ["samples.xls", "samples.ods", "samples.txt"]:
            path = self.write_csv(name, "velocity,added_force\n1,2\n")
            with self.assertRaises(rd.DataFormatError):
                rd.load_samples(path)

    def test_empty_csv(self):
        path = self.write_csv("samples.csv", "")
        with self.assertRaises(rd.DataFormatError):
            rd.load_samples(path)

    def test_empty_cell_is_nan(self):
        path = self.write_csv("samples.csv", "velocity,added_force\n1.0,2.0\n2.0,\n3.0,7.0\n")
        samples = rd.load_samples(path)
        self.assertTrue(np.isnan(samples[data.ADDED_FORCE][1]))

    def test_integers_become_floats(self):
        path = self.write_csv("samples.csv", "velocity,added_force\n1,2\n2,5\n")
        samples = rd.load_samples(path)
        self.assertEqual(samples[data.VELOCITY].dtype, np.float64)

    def test_extra_columns_are_kept(self):
        path = self.write_csv("samples.csv", "velocity,added_force,note\n1,2,a\n2,5,b\n")
        samples = rd.load_samples(path)
        self.assertEqual(samples["note"].tolist(), ["a", "b"])


if __name__ == "__main__":
    unittest.main()
