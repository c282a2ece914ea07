from halozero.structs import Circlef, Color4f, Ellipsef, Point2f, Rectf, Window


def test_window_defaults():
    w = Window()
    assert w.title == "Title"
    assert w.width == 320.0
    assert w.height == 180.0
    assert w.is_vsync_on is True


def test_point_default_is_origin():
    p = Point2f()
    assert (p.x, p.y) == (0.0, 0.0)


def test_rect_defaults_are_zero():
    r = Rectf()
    assert (r.left, r.bottom, r.width, r.height) == (0.0, 0.0, 0.0, 0.0)


def test_rect_center_is_midpoint():
    r = Rectf(3.0, -5.0, 10.0, 6.0)
    c = r.center()
    assert c.x - r.left == r.left + r.width - c.x
    assert c.y - r.bottom == r.bottom + r.height - c.y


def test_rect_center_of_empty_rect_is_corner():
    r = Rectf(7.5, 2.5, 0.0, 0.0)
    assert r.center() == Point2f(7.5, 2.5)


def test_color_default_is_opaque_black():
    c = Color4f()
    assert (c.r, c.g, c.b, c.a) == (0.0, 0.0, 0.0, 1.0)


def test_circle_defaults_and_independence():
    a = Circlef()
    b = Circlef()
    a.center.x = 4.0
    assert b.center == Point2f()
    assert a.radius == 0.0


def test_ellipse_fields():
    e = Ellipsef(Point2f(1.0, 2.0), 3.0, 4.0)
    assert e.center == Point2f(1.0, 2.0)
    assert (e.radius_x, e.radius_y) == (3.0, 4.0)
    assert Ellipsef().center == Point2f()