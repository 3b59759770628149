import pytest

from enginecore.objects import (
    INDEX_NONE,
    UClass,
    UObject,
    cast,
    cast_checked,
    iterate_objects,
)


class AActor(UObject):
    pass


class ACube(AActor):
    pass


class ALight(UObject):
    pass


def test_static_class_is_shared():
    first_root = UObject.static_class()
    first_cube = ACube.static_class()
    assert first_root.is_child_of(UObject.static_class())
    assert first_cube.is_child_of(ACube.static_class())
    assert ACube.static_class().is_child_of(first_cube)
    assert not UObject.static_class().is_child_of(first_cube)
    assert first_cube.name == "ACube"
    assert first_root.name == "UObject"


def test_static_class_names():
    assert UObject.static_class().name == "UObject"
    assert ACube.static_class().name == "ACube"


def test_super_class_chain():
    assert ACube.static_class().super_class is AActor.static_class()
    assert AActor.static_class().super_class is UObject.static_class()
    assert UObject.static_class().super_class is None


def test_uclass_derives_from_uobject():
    assert UClass.static_class().super_class is UObject.static_class()


def test_is_child_of():
    cube = ACube.static_class()
    actor = AActor.static_class()
    root = UObject.static_class()
    assert cube.is_child_of(actor)
    assert cube.is_child_of(cube)
    assert cube.is_child_of(root)
    assert not root.is_child_of(actor)
    assert not actor.is_child_of(cube)
    assert not cube.is_child_of(ALight.static_class())
    assert not cube.is_child_of(None)


def test_is_a_accepts_type_or_class():
    cube = ACube()
    assert cube.is_a(AActor)
    assert cube.is_a(AActor.static_class())
    assert cube.is_a(UObject)
    assert not cube.is_a(ALight)
    plain = UObject()
    assert plain.is_a(UObject.static_class())
    assert not plain.is_a(AActor)


def test_new_object_defaults():
    obj = UObject()
    assert obj.name == "None"
    assert obj.uuid == 0
    assert obj.internal_index == INDEX_NONE
    assert obj.uclass is UObject.static_class()


def test_manual_uclass_has_no_default_object():
    info = UClass("Detached", 0, 1, None)
    assert info.default_object() is None
    assert info.name == "Detached"


def test_default_object_is_cached_instance():
    info = AActor.static_class()
    default = info.default_object()
    assert isinstance(default, AActor)
    assert info.default_object() is default

    root_info = UObject.static_class()
    root_default = root_info.default_object()
    assert isinstance(root_default, UObject)
    assert root_info.default_object() is root_default


def test_cast_up_and_down():
    cube = ACube()
    assert cast(AActor, cube) is cube
    actor_ref = cast(AActor, cube)
    assert cast(ACube, actor_ref) is cube


def test_cast_failures_return_none():
    assert cast(ALight, ACube()) is None
    assert cast(AActor, None) is None
    assert cast(AActor, ALight()) is None


def test_cast_checked():
    cube = ACube()
    assert cast_checked(AActor, cube) is cube
    with pytest.raises(ValueError):
        cast_checked(AActor, None)
    with pytest.raises(TypeError):
        cast_checked(ACube, ALight())


def test_iterate_objects_filters_mapping():
    actor, cube, light = AActor(), ACube(), ALight()
    found = list(iterate_objects({1: actor, 2: cube, 3: light}, AActor))
    assert found == [actor, cube]


def test_iterate_objects_is_snapshot():
    objects = [ACube(), ALight()]
    iterator = iterate_objects(objects, ACube)
    objects.append(ACube())
    assert len(list(iterator)) == 1