"""Tests for scanning/classifier.py."""

import pytest

from memberorder.domain.model.enums import MemberCategory
from memberorder.domain.model.member import UNKNOWN_NAME, Member
from memberorder.infrastructure.scanning.classifier import (
    classify_declaration,
    classify_member,
    extract_member_name,
    is_method_declaration,
    looks_like_call_or_statement,
)
from memberorder.infrastructure.scanning.patterns import FIELD
from tests.factories import make_declaration


class TestConstants:
    """Tests for constant classification."""

    def test_public_const(self) -> None:
        assert classify_member("public const int Max = 10;") is MemberCategory.PUBLIC_CONST

    def test_private_const(self) -> None:
        assert classify_member('private const string Tag = "x";') is MemberCategory.PRIVATE_CONST

    def test_const_wins_over_field_shape(self) -> None:
        text = "public const int Foo = 1;"
        assert FIELD.match(text) is not None
        assert classify_member(text) is MemberCategory.PUBLIC_CONST

    def test_const_wins_over_attribute(self) -> None:
        result = classify_member("public const int X = 1;", attributed=True)
        assert result is MemberCategory.PUBLIC_CONST

    def test_const_without_access_modifier(self) -> None:
        assert classify_member("const int Local = 1;") is None

    def test_whitespace_collapsed(self) -> None:
        assert classify_member("public   const\tint  X = 1;") is MemberCategory.PUBLIC_CONST


class TestFields:
    """Tests for readonly, attributed and plain field classification."""

    @pytest.mark.parametrize(
        "text",
        [
            "private readonly List<int> _items = new List<int>();",
            "private static readonly int Seed = 4;",
            "readonly int x;",
        ],
    )
    def test_readonly(self, text: str) -> None:
        assert classify_member(text) is MemberCategory.READONLY_FIELD

    def test_readonly_wins_over_attribute(self) -> None:
        result = classify_member("private readonly int x;", attributed=True)
        assert result is MemberCategory.READONLY_FIELD

    def test_attributed_field(self) -> None:
        result = classify_member("private int health;", attributed=True)
        assert result is MemberCategory.ATTRIBUTED_FIELD

    def test_attributed_wins_over_property(self) -> None:
        result = classify_member("public int Hp { get; set; }", attributed=True)
        assert result is MemberCategory.ATTRIBUTED_FIELD

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("private int _count;", MemberCategory.PRIVATE_FIELD),
            ("private List<Item> _items;", MemberCategory.PRIVATE_FIELD),
            ("private Dictionary<string, int> _map = new();", MemberCategory.PRIVATE_FIELD),
            ("private int x", MemberCategory.PRIVATE_FIELD),
            ('public string title = "x";', MemberCategory.PUBLIC_FIELD),
            ("public float[] weights;", MemberCategory.PUBLIC_FIELD),
        ],
    )
    def test_plain_fields(self, text: str, expected: MemberCategory) -> None:
        assert classify_member(text) is expected


class TestEventsAndProperties:
    """Tests for event and property classification."""

    @pytest.mark.parametrize(
        "text",
        [
            "public event Action OnDied;",
            "event EventHandler Changed;",
            "public static event Action<int> Scored;",
        ],
    )
    def test_event(self, text: str) -> None:
        assert classify_member(text) is MemberCategory.EVENT

    @pytest.mark.parametrize(
        "text",
        [
            "public int Count { get; private set; }",
            'public string Name { get; set; } = "x";',
            "public int Id { get; init; }",
            "public int Max { get; }",
            "public int Hp { get { return _hp; } set { _hp = value; } }",
            "public float Ratio => _a / _b;",
            "public bool Alive => _hp > 0;",
            "private int Speed => _kind switch { Kind.Fast when _boost => 2, _ => 1 };",
        ],
    )
    def test_property(self, text: str) -> None:
        assert classify_member(text) is MemberCategory.PROPERTY

    def test_return_lambda_is_not_property(self) -> None:
        assert classify_member("return x => x * 2;") is None

    @pytest.mark.parametrize(
        "text",
        [
            "Kind.Fast when x > 3 => 1,",
            "State.Idle when speed > 0 => 1,",
            "Kind.Slow => 2,",
            "string s => s.Length,",
            "int n when n >= 10 => \"big\"",
            "_ => 0",
        ],
    )
    def test_switch_arm_is_not_property(self, text: str) -> None:
        assert classify_member(text) is None


class TestMethods:
    """Tests for method classification."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("public void Jump() {", MemberCategory.PUBLIC_METHOD),
            ("public override string ToString() {", MemberCategory.PUBLIC_METHOD),
            ("public async Task<int> LoadAsync(string path) {", MemberCategory.PUBLIC_METHOD),
            ("public T Get<T>(int id) where T : class {", MemberCategory.PUBLIC_METHOD),
            ("public int Double(int x) => x * 2;", MemberCategory.PUBLIC_METHOD),
            ("public void Log(string m) => Debug.Log(m);", MemberCategory.PUBLIC_METHOD),
            ("private void Die() {", MemberCategory.PRIVATE_METHOD),
            ("protected virtual void Tick() {", MemberCategory.PRIVATE_METHOD),
            ("private void Hit() => health -= 1;", MemberCategory.PRIVATE_METHOD),
        ],
    )
    def test_access(self, text: str, expected: MemberCategory) -> None:
        assert classify_member(text) is expected

    @pytest.mark.parametrize(
        "text",
        [
            "void Update() {",
            "private void Awake() {",
            "public void OnEnable() {",
            "private void OnTriggerEnter2D(Collider2D other) {",
        ],
    )
    def test_lifecycle(self, text: str) -> None:
        assert classify_member(text) is MemberCategory.LIFECYCLE_METHOD

    def test_lifecycle_names_case_sensitive(self) -> None:
        assert classify_member("void update() {") is MemberCategory.PRIVATE_METHOD

    def test_constructor_not_a_member(self) -> None:
        assert classify_member("public Player(int hp) {") is None

    def test_declaration_ending_in_semicolon_reads_as_call(self) -> None:
        assert classify_member("void Fire();") is None


class TestNonMembers:
    """Tests for statements and nested code."""

    @pytest.mark.parametrize(
        "text",
        [
            '{',
            '}',
            'Debug.Log("x");',
            "if (x) {",
            "return Foo();",
            "DoThing();",
            "var p = new Player();",
            "count += 1;",
            "foreach (var x in xs) {",
            "int total = Sum(a, b);",
            "Init()",
            "public class Player : MonoBehaviour {",
        ],
    )
    def test_not_classified(self, text: str) -> None:
        assert classify_member(text) is None


class TestCallHeuristics:
    """Tests for is_method_declaration() and looks_like_call_or_statement()."""

    def test_expression_bodied_exempt(self) -> None:
        assert not looks_like_call_or_statement("public void Log(string m) => Debug.Log(m);")

    def test_member_call(self) -> None:
        assert looks_like_call_or_statement("player.Move(1, 2)")

    def test_signature(self) -> None:
        assert is_method_declaration("public void Jump() {")

    def test_statement(self) -> None:
        assert not is_method_declaration("while (true) {")


class TestExtractMemberName:
    """Tests for extract_member_name()."""

    @pytest.mark.parametrize(
        ("text", "category", "expected"),
        [
            ("public const int Max = 10;", MemberCategory.PUBLIC_CONST, "Max"),
            ("private Dictionary<string, int> _map = new();", MemberCategory.PRIVATE_FIELD, "_map"),
            ("private int x", MemberCategory.PRIVATE_FIELD, "x"),
            ("public int Count { get; private set; }", MemberCategory.PROPERTY, "Count"),
            ("public float Ratio => _a / _b;", MemberCategory.PROPERTY, "Ratio"),
            ("public static event Action<int> Scored;", MemberCategory.EVENT, "Scored"),
            ("public async Task<int> LoadAsync(string path) {", MemberCategory.PUBLIC_METHOD, "LoadAsync"),
            ("void Update() {", MemberCategory.LIFECYCLE_METHOD, "Update"),
        ],
    )
    def test_names(self, text: str, category: MemberCategory, expected: str) -> None:
        assert extract_member_name(text, category) == expected

    @pytest.mark.parametrize(
        ("text", "category"),
        [
            ("event;", MemberCategory.EVENT),
            ("{ }", MemberCategory.PROPERTY),
            ("=", MemberCategory.PRIVATE_FIELD),
            ("foo", MemberCategory.PUBLIC_METHOD),
        ],
    )
    def test_unknown_sentinel(self, text: str, category: MemberCategory) -> None:
        assert extract_member_name(text, category) == UNKNOWN_NAME


class TestClassifyDeclaration:
    """Tests for classify_declaration()."""

    def test_member(self) -> None:
        declaration = make_declaration("private int health;", attributed=True, line=4)
        assert classify_declaration(declaration) == Member(
            name="health",
            category=MemberCategory.ATTRIBUTED_FIELD,
            line=4,
        )

    def test_non_member(self) -> None:
        assert classify_declaration(make_declaration("}")) is None
