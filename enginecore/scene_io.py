"""Saving and loading scenes as JSON files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any

SCENE_SUFFIX = ".scene"

Vec3 = tuple[float, float, float]

_STATIC_MESH = "StaticMesh"


@dataclass
class ObjectInfo:
    """Saved state of one actor."""

    location: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)
    object_type: str = ""
    static_mesh_asset_path: str = ""
    uuid: int = 0


@dataclass
class WorldInfo:
    """Saved state of a whole scene."""

    object_infos: list[ObjectInfo] = field(default_factory=list)
    actor_count: int = 0
    version: int = 0
    scene_name: str = ""
    next_uuid: int = 0


def _vec3(value: Any) -> Vec3:
    items = list(value) if isinstance(value, list) else []
    items += [0.0] * (3 - len(items))
    return (float(items[0]), float(items[1]), float(items[2]))


def _uuid_from_key(key: str) -> int:
    try:
        return int(key)
    except ValueError:
        return 0


def load_scene(scene_name: str | os.PathLike[str]) -> WorldInfo:
    """Read ``scene_name`` plus the scene suffix.

    Raises FileNotFoundError if the file does not exist.
    """
    path = os.fspath(scene_name) + SCENE_SUFFIX
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        raise FileNotFoundError(f"scene file not found: {path}") from None

    world = WorldInfo(
        version=int(data.get("Version", 0)),
        scene_name=str(data.get("SceneName", "")),
        actor_count=int(data.get("ActorCount", 0)),
        next_uuid=int(data.get("NextUUID", 0)),
    )
    actors = data.get("Actors") or {}
    for key in sorted(actors):
        actor = actors[key]
        info = ObjectInfo(
            location=_vec3(actor.get("Location")),
            rotation=_vec3(actor.get("Rotation")),
            scale=_vec3(actor.get("Scale")),
            object_type=str(actor.get("Type", "")),
            uuid=_uuid_from_key(key),
        )
        if info.object_type == _STATIC_MESH and "StaticMeshAssetPath" in actor:
            info.static_mesh_asset_path = str(actor["StaticMeshAssetPath"])
        world.object_infos.append(info)
    return world


def save_scene(world_info: WorldInfo) -> None:
    """Write the scene to its name plus the scene suffix; unnamed scenes are skipped."""
    if not world_info.scene_name:
        return

    actors: dict[str, dict[str, Any]] = {}
    for info in world_info.object_infos:
        actor: dict[str, Any] = {
            "Location": list(info.location),
            "Rotation": list(info.rotation),
            "Scale": list(info.scale),
            "Type": info.object_type,
        }
        if info.object_type == _STATIC_MESH and info.static_mesh_asset_path:
            actor["StaticMeshAssetPath"] = info.static_mesh_asset_path
        actors[str(info.uuid)] = actor

    data: dict[str, Any] = {
        "Version": world_info.version,
        "NextUUID": world_info.next_uuid,
        "ActorCount": world_info.actor_count,
        "SceneName": world_info.scene_name,
    }
    if actors:
        data["Actors"] = actors

    with open(world_info.scene_name + SCENE_SUFFIX, "w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, sort_keys=True)