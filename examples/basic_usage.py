"""
Basic usage example for accessortracker.
"""

from accessortracker import AccessorClassifier
from accessortracker.java_adapter import JavaModelBuilder

code = '''
public class Person {
    private String name;
    private boolean active;
    public int visits;

    public Person(String name) { this.name = name; }
    public String getName() { return name; }
    public void setName(String name) { this.name = name; }
    public boolean isActive() { return active; }
    public int getVisits() { return visits; }
    public void touch() { visits++; }
}
'''

builder = JavaModelBuilder()
classifier = AccessorClassifier()

for class_model in builder.parse(code):
    print(f"🔍 {class_model.name}")
    for method in class_model.methods:
        kind = classifier.classify(class_model, method)
        if kind:
            print(f"   ✅ {method.name}: {kind.value}")
        else:
            print(f"   ➖ {method.name}: kept for metrics")

    stats = classifier.get_accessor_stats([class_model])
    print(f"\n📊 {stats['accessors']} of {stats['total_methods']} methods are accessors")
