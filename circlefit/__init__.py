"""Least-squares circle fitting on noisy 2D point clouds."""

from circlefit.circle import Circle, CircleFit, sample_noisy_circle
from circlefit.fit import algebraic_fit, fit_circle, initial_guess, radial_residuals, squared_error
from circlefit.io import PointCloudSpec, build_cloud_from_definition, load_cloud, load_cloud_definition

__all__ = [
    "Circle",
    "CircleFit",
    "sample_noisy_circle",
    "radial_residuals",
    "squared_error",
    "initial_guess",
    "algebraic_fit",
    "fit_circle",
    "PointCloudSpec",
    "load_cloud",
    "load_cloud_definition",
    "build_cloud_from_definition",
]
