"""Command-line entry point that evaluates one Vector3D operation."""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from .config import Vector3DConfig
from .constants import Operation
from .vector_3d import Vector3D

logger = logging.getLogger(__name__)

VECTOR_OPERAND = {Operation.ADD, Operation.DOT, Operation.ANGLE}
SCALAR_OPERAND = {Operation.MULTIPLY}


def parse_vector(text: str) -> Vector3D:
    """Parse ``"x,y,z"`` into a Vector3D."""
    parts = text.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"Expected 3 comma-separated components, got {len(parts)}: {text!r}"
        )
    try:
        x, y, z = (float(part) for part in parts)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid vector {text!r}: {e}") from e
    return Vector3D(x, y, z)


def parse_scalar(text: str) -> float:
    try:
        return float(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid scalar {text!r}") from e


def _vector_operand(operation: Operation, operand: Vector3D | float | None) -> Vector3D:
    if not isinstance(operand, Vector3D):
        raise ValueError(f"{operation} requires a vector operand, got {operand!r}")
    return operand


def _scalar_operand(operation: Operation, operand: Vector3D | float | None) -> float:
    if operand is None or isinstance(operand, Vector3D):
        raise ValueError(f"{operation} requires a scalar operand, got {operand!r}")
    return float(operand)


def evaluate(operation: Operation, vector: Vector3D, operand: Vector3D | float | None = None) -> str:
    """Apply ``operation`` and render the result as printed by the CLI.

    Raises:
        ValueError: If ``operand`` is missing or of the wrong kind for
            ``operation``.
        ZeroMagnitudeError: From ``normalize`` and ``angle``.
    """
    match operation:
        case Operation.SHOW:
            return str(vector)
        case Operation.MAGNITUDE:
            return str(vector.get_magnitude())
        case Operation.NORMALIZE:
            return str(vector.normalize())
        case Operation.ADD:
            return str(vector.add(_vector_operand(operation, operand)))
        case Operation.MULTIPLY:
            return str(vector.multiply(_scalar_operand(operation, operand)))
        case Operation.DOT:
            return str(vector.dot_product(_vector_operand(operation, operand)))
        case Operation.ANGLE:
            return str(vector.angle_between(_vector_operand(operation, operand)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate a Vector3D operation",
        epilog='Put "--" before a vector starting with a negative component: angle 1,0,0 -- -1,0,0',
    )
    parser.add_argument("--config", type=str, help="Path to config.yaml")
    parser.add_argument("operation", choices=[op.value for op in Operation])
    parser.add_argument("vector", type=parse_vector, help='Vector as "x,y,z"')
    parser.add_argument(
        "operand",
        nargs="?",
        help='Second vector "x,y,z" for add/dot/angle, scalar for multiply',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    # Load configuration
    config = Vector3DConfig.from_yaml(args.config or os.getenv("VECTOR3D_CONFIG"))

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    operation = Operation(args.operation)
    operand: Vector3D | float | None = None
    try:
        if operation in VECTOR_OPERAND:
            if args.operand is None:
                parser.error(f"{operation} requires a second vector")
            operand = parse_vector(args.operand)
        elif operation in SCALAR_OPERAND:
            if args.operand is None:
                parser.error(f"{operation} requires a scalar")
            operand = parse_scalar(args.operand)
        elif args.operand is not None:
            parser.error(f"{operation} takes no operand")
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    logger.debug(f"Evaluating {operation} on {args.vector!r} with operand {operand!r}")

    try:
        result = evaluate(operation, args.vector, operand)
    except ValueError as e:
        logger.error(f"Failed to evaluate {operation}: {e}")
        return 1

    if config.display.echo_operands:
        print(args.vector)
        if operand is not None:
            print(operand)
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
