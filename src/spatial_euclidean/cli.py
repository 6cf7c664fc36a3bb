# -*- coding: utf-8 -*-
"""Spatial Euclidean CLI"""

import argparse
import logging
import sys
import typing
from pathlib import Path

import spatial_euclidean as spe
from spatial_euclidean.common import DEFAULT_TAG_NAME
from spatial_euclidean.logging_config import setup_logging

# script constants
DEFAULT_VERBOSITY = 0
SUB_CMD_DISTANCE = 'distance'
SUB_CMD_CENTROID = 'centroid'
SUB_CMD_TO_XML = 'to-xml'
SUB_CMD_FROM_XML = 'from-xml'


def point_type(text: str) -> spe.Point2D:
    try:
        return spe.Point2D.parse(text)
    except spe.ParseError as _err:
        raise argparse.ArgumentTypeError(f"Invalid point coordinates: '{text}'") from _err


def start_command(parse_args: typing.Dict) -> typing.Union[spe.Point2D, float, str]:
    """Main workflow, returns result for testing purposes"""

    sub_cmd: str = parse_args["subcommand"]
    verbosity: int = parse_args.get("verbosity", DEFAULT_VERBOSITY)
    if verbosity >= 2:
        setup_logging(logging.DEBUG)
    if verbosity >= 1:
        print(f"[DEBUG] called '{sub_cmd}' with {parse_args}")

    result: typing.Union[spe.Point2D, float, str]
    if sub_cmd == SUB_CMD_DISTANCE:
        point1: spe.Point2D = parse_args["point1"]
        point2: spe.Point2D = parse_args["point2"]
        result = point1.distance_to(point2)
    elif sub_cmd == SUB_CMD_CENTROID:
        points: typing.List[spe.Point2D] = parse_args["points"]
        result = spe.Point2D.centroid(points)
        if verbosity >= 1:
            print(f"[DEBUG] centroid of {len(points)} points")
    elif sub_cmd == SUB_CMD_TO_XML:
        point: spe.Point2D = parse_args["point"]
        result = point.to_xml(parse_args.get("tag") or DEFAULT_TAG_NAME)
    elif sub_cmd == SUB_CMD_FROM_XML:
        result = spe.Point2D.read_from(Path(parse_args["input_xml_file"]))
    else:
        raise spe.InvalidArgumentError(f"Unknown subcommand '{sub_cmd}'")
    print(result)
    return result


def start(argv: typing.Optional[typing.List[str]] = None):
    """Wrap argparsing"""
    arg_parser = argparse.ArgumentParser(
        prog="spatial-euclidean",
        description=f"Euclidean 2D point utilities {spe.__version__}",
    )
    arg_parser.add_argument(
        "-v", "--verbosity",
        action='count',
        default=DEFAULT_VERBOSITY,
        required=False,
        help=f"Verbosity flag. To increase, append multiple 'v's (optional; default: '{DEFAULT_VERBOSITY}')"
    )
    sub_arg_parsers = arg_parser.add_subparsers(
        title='subcommands',
        dest='subcommand',
        required=True,
    )
    distance_parser = sub_arg_parsers.add_parser(
        SUB_CMD_DISTANCE,
        help="Straight line distance between two points, f.e.: distance '0,0' '(3, 4)'"
    )
    distance_parser.add_argument("point1", type=point_type)
    distance_parser.add_argument("point2", type=point_type)
    centroid_parser = sub_arg_parsers.add_parser(
        SUB_CMD_CENTROID,
        help="Center of mass of given points"
    )
    centroid_parser.add_argument("points", type=point_type, nargs='+')
    to_xml_parser = sub_arg_parsers.add_parser(
        SUB_CMD_TO_XML,
        help="Write point as XML element with X/Y attributes"
    )
    to_xml_parser.add_argument("point", type=point_type)
    to_xml_parser.add_argument(
        "-t", "--tag",
        default=DEFAULT_TAG_NAME,
        required=False,
        help=f"Element name (optional; default: '{DEFAULT_TAG_NAME}')"
    )
    from_xml_parser = sub_arg_parsers.add_parser(
        SUB_CMD_FROM_XML,
        help="Read point from XML file, X/Y given as attributes or child elements"
    )
    from_xml_parser.add_argument("input_xml_file", help="Path of XML file to read")

    main_args = vars(arg_parser.parse_args(argv))
    try:
        start_command(main_args)
    except (spe.SpatialException, OSError) as _exc:
        print(f"[ERROR] {_exc}")
        sys.exit(1)


if __name__ == "__main__":
    start()
