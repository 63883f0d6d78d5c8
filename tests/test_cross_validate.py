"""Unit tests for k-fold cross-validation of the elastic-net path."""

import numpy as np
import pandas as pd
import pytest

from cross_validate import cv_enet, cv_table
from cvpartition import (cvpartition_contiguous, cvpartition_random,
                         foldid_from_partition, partition_from_foldid)
from enet_errors import InvalidInputError
from enet_path import enet_path
from parallel_worker import fit_fold


class TestPartitions:
    """Fold assignment."""

    def test_random_covers_all_rows_once(self):
        parts = cvpartition_random(23, 5, seed=1)

        assert len(parts) == 5
        np.testing.assert_array_equal(np.sort(np.concatenate(parts)), np.arange(23))
        sizes = [len(p) for p in parts]
        assert max(sizes) - min(sizes) <= 1

    def test_random_is_deterministic(self):
        a = foldid_from_partition(cvpartition_random(50, 10, seed=3), 50)
        b = foldid_from_partition(cvpartition_random(50, 10, seed=3), 50)

        assert a.tobytes() == b.tobytes()

    def test_seed_changes_assignment(self):
        a = foldid_from_partition(cvpartition_random(50, 10, seed=3), 50)
        b = foldid_from_partition(cvpartition_random(50, 10, seed=4), 50)

        assert not np.array_equal(a, b)

    def test_contiguous(self):
        parts = cvpartition_contiguous(10, 3)

        np.testing.assert_array_equal(parts[0], [0, 1, 2])
        np.testing.assert_array_equal(parts[1], [3, 4, 5])
        np.testing.assert_array_equal(parts[2], [6, 7, 8, 9])

    @pytest.mark.parametrize("k", [1, 11])
    def test_bad_fold_count(self, k):
        with pytest.raises(InvalidInputError):
            cvpartition_random(10, k)

    def test_foldid_round_trip(self):
        foldid = np.array([2, 0, 1, 2, 0, 1, 1])
        parts = partition_from_foldid(foldid)

        np.testing.assert_array_equal(parts[0], [1, 4])
        np.testing.assert_array_equal(foldid_from_partition(parts, 7), foldid)

    def test_single_fold_label_rejected(self):
        with pytest.raises(InvalidInputError):
            partition_from_foldid(np.zeros(5))


class TestFitFold:
    """Per-fold worker."""

    def test_scores_held_out_rows(self, sparse_data):
        X, y = sparse_data
        lambdas = enet_path(X, y, {"nlambda": 8})["lambda"]
        test_idx = np.arange(0, 100, 5)
        err = fit_fold(X, y, test_idx, {"lambdas": lambdas})

        train = np.setdiff1d(np.arange(100), test_idx)
        fit = enet_path(X[train], y[train], {"lambdas": lambdas})
        pred = X[test_idx] @ fit["beta"] + fit["a0"]
        np.testing.assert_allclose(err, np.mean((pred - y[test_idx, None]) ** 2, axis=0))

    def test_mae(self, sparse_data):
        X, y = sparse_data
        err = fit_fold(X, y, np.arange(10), {"lambdas": [0.5, 0.1]}, measure="mae")
        assert err.shape == (2,)
        assert np.all(err > 0)


class TestCrossValidate:
    """Aggregation and lambda selection."""

    def test_selects_interior_lambda(self, sparse_data):
        X, y = sparse_data
        cv = cv_enet(X, y, {"alpha": 1.0, "kfold": 10, "seed": 0})
        lmax = cv["lambda"][0]

        assert 0 < cv["lambda_min"] < lmax
        assert cv["cvm"][cv["index_min"]] == cv["cvm"].min()
        assert cv["fold_errors"].shape == (10, len(cv["lambda"]))

    def test_one_se_rule(self, sparse_data):
        X, y = sparse_data
        cv = cv_enet(X, y, {"alpha": 0.5, "seed": 1})
        i, j = cv["index_min"], cv["index_1se"]

        assert cv["lambda_1se"] >= cv["lambda_min"]
        assert cv["cvm"][j] <= cv["cvm"][i] + cv["cvsd"][i]
        assert np.all(cv["cvm"][:j] > cv["cvm"][i] + cv["cvsd"][i])

    def test_standard_error(self, sparse_data):
        X, y = sparse_data
        cv = cv_enet(X, y, {"kfold": 5, "nlambda": 10})
        fe = cv["fold_errors"]

        np.testing.assert_allclose(cv["cvm"], fe.mean(axis=0))
        np.testing.assert_allclose(cv["cvsd"], fe.std(axis=0, ddof=1) / np.sqrt(5))
        np.testing.assert_allclose(cv["cvup"] - cv["cvlo"], 2 * cv["cvsd"])

    def test_deterministic(self, sparse_data):
        X, y = sparse_data
        cv1 = cv_enet(X, y, {"alpha": 1.0, "seed": 11})
        cv2 = cv_enet(X, y, {"alpha": 1.0, "seed": 11})

        assert cv1["foldid"].tobytes() == cv2["foldid"].tobytes()
        assert cv1["lambda_min"] == cv2["lambda_min"]
        np.testing.assert_array_equal(cv1["cvm"], cv2["cvm"])

    def test_refit_coefficients_from_full_data(self, sparse_data):
        X, y = sparse_data
        cv = cv_enet(X, y, {"alpha": 1.0, "nlambda": 20})
        full = enet_path(X, y, {"alpha": 1.0, "nlambda": 20})

        np.testing.assert_allclose(cv["coef_min"], full["beta"][:, cv["index_min"]])
        assert cv["a0_min"] == pytest.approx(full["a0"][cv["index_min"]])

    def test_parallel_matches_sequential(self, sparse_data):
        X, y = sparse_data
        seq = cv_enet(X, y, {"kfold": 4, "nlambda": 15})
        par = cv_enet(X, y, {"kfold": 4, "nlambda": 15, "n_jobs": 2, "backend": "threading"})

        np.testing.assert_allclose(par["fold_errors"], seq["fold_errors"])
        assert par["lambda_min"] == seq["lambda_min"]

    def test_explicit_foldid(self, sparse_data):
        X, y = sparse_data
        foldid = np.arange(100) % 4
        cv = cv_enet(X, y, {"foldid": foldid, "nlambda": 10})

        np.testing.assert_array_equal(cv["foldid"], foldid)
        assert cv["fold_errors"].shape[0] == 4

    def test_contiguous_partition(self, sparse_data):
        X, y = sparse_data
        cv = cv_enet(X, y, {"partition": "contiguous", "kfold": 5, "nlambda": 10})

        np.testing.assert_array_equal(cv["foldid"], np.repeat(np.arange(5), 20))

    def test_user_lambdas(self, sparse_data):
        X, y = sparse_data
        cv = cv_enet(X, y, {"lambdas": [1.0, 0.1, 0.01], "kfold": 3})

        np.testing.assert_array_equal(cv["lambda"], [1.0, 0.1, 0.01])

    @pytest.mark.parametrize("params", [
        {"measure": "r2"}, {"partition": "blocked"}, {"kfold": 1}, {"kfold": 500},
        {"foldid": np.zeros(10)},
    ])
    def test_bad_options(self, sparse_data, params):
        X, y = sparse_data
        with pytest.raises(InvalidInputError):
            cv_enet(X, y, params)

    def test_cv_table(self, sparse_data):
        X, y = sparse_data
        cv = cv_enet(pd.DataFrame(X, columns=["a", "b", "c"]), y, {"kfold": 3, "nlambda": 7})
        df = cv_table(cv)

        assert list(df.columns) == ["cvm", "cvsd", "cvup", "cvlo", "nzero"]
        assert len(df) == 7
        assert cv["fit"]["names"] == ["a", "b", "c"]
